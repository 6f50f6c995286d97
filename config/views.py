import logging

from django.http import JsonResponse
from rest_framework import status
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler


logger = logging.getLogger(__name__)


def health_check(request):
    """Liveness probe."""
    return JsonResponse({'status': 'ok'})


def api_exception_handler(exc, context):
    """
    Project-wide DRF exception handler.

    Validation failures get a generic message with the field errors attached,
    other API exceptions keep DRF's response, and anything DRF does not know
    about is logged and reported as a generic server error.
    """
    response = exception_handler(exc, context)

    if response is None:
        view = context.get('view')
        logger.exception(
            "Unhandled error in %s", view.__class__.__name__ if view else 'API view'
        )
        return Response(
            {'message': 'Server error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    if isinstance(exc, ValidationError):
        response.data = {
            'message': 'Invalid data',
            'errors': response.data,
        }

    return response


def error_404(request, exception):
    """Custom 404 handler."""
    return JsonResponse({
        'error': 'Not found',
        'status': 404
    }, status=404)


def error_500(request):
    """Custom 500 handler."""
    return JsonResponse({
        'error': 'Internal server error',
        'status': 500
    }, status=500)
