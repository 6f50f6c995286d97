from django.core.validators import RegexValidator
from rest_framework import serializers

github_name_validator = RegexValidator(
    r'^(?!\.+$)[A-Za-z0-9_.-]+$',
    'Only letters, digits, "-", "_" and "." are allowed.'
)


class GitHubExportRequestSerializer(serializers.Serializer):
    """
    Validate input for a GitHub export.

    Fields:
        owner (str): Repository owner
        repo (str): Repository name
        token (str): Personal access token, never stored
        message (str): Optional commit message
    """

    owner = serializers.CharField(max_length=100, validators=[github_name_validator])
    repo = serializers.CharField(max_length=100, validators=[github_name_validator])
    token = serializers.CharField(write_only=True, trim_whitespace=True)
    message = serializers.CharField(required=False, allow_blank=True, max_length=500)


class GitHubExportResponseSerializer(serializers.Serializer):
    success = serializers.BooleanField()
    message = serializers.CharField()
    url = serializers.URLField(allow_null=True)


class GitHubExportErrorSerializer(serializers.Serializer):
    error = serializers.CharField()
    details = serializers.JSONField(required=False)
