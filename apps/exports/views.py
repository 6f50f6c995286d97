from rest_framework import status
from rest_framework.decorators import api_view
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema

from .serializers import (
    GitHubExportRequestSerializer,
    GitHubExportResponseSerializer,
    GitHubExportErrorSerializer,
)
from .services import push_export_to_github, GitHubExportError


@extend_schema(
    request=GitHubExportRequestSerializer,
    responses={
        200: GitHubExportResponseSerializer,
        400: GitHubExportErrorSerializer,
        502: GitHubExportErrorSerializer,
    },
    description="Push a JSON snapshot of work logs, finances and debts to a GitHub repository.",
    tags=['export'],
)
@api_view(['POST'])
def github_export(request):
    """Export ledger data to GitHub."""
    serializer = GitHubExportRequestSerializer(data=request.data)
    if not serializer.is_valid():
        return Response(
            {
                'error': 'Missing required parameters (token, repo, owner)',
                'details': serializer.errors,
            },
            status=status.HTTP_400_BAD_REQUEST
        )
    data = serializer.validated_data

    try:
        result = push_export_to_github(
            owner=data['owner'],
            repo=data['repo'],
            token=data['token'],
            message=data.get('message') or None,
        )
    except GitHubExportError as e:
        return Response(
            {
                'error': 'Export to GitHub failed',
                'details': e.details,
            },
            status=e.status_code
        )

    return Response({
        'success': True,
        'message': 'Data were exported to GitHub',
        'url': result['url'],
    })
