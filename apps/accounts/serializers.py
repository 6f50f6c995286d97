from rest_framework import serializers
from django.contrib.auth.password_validation import validate_password
from .models import User


class UserSerializer(serializers.ModelSerializer):
    """Basic user serializer for the dashboard header."""

    displayName = serializers.CharField(source='display_name', read_only=True)
    avatarInitials = serializers.CharField(source='avatar_initials', read_only=True)
    createdAt = serializers.DateTimeField(source='created_at', read_only=True)

    class Meta:
        model = User
        fields = ['id', 'username', 'displayName', 'avatarInitials', 'createdAt']
        read_only_fields = fields


class UserRegistrationSerializer(serializers.Serializer):
    """Validate registration input."""

    username = serializers.CharField(max_length=255)
    password = serializers.CharField(
        write_only=True,
        validators=[validate_password],
        style={'input_type': 'password'}
    )
    displayName = serializers.CharField(max_length=100)
    avatarInitials = serializers.CharField(max_length=4, required=False, allow_blank=True)


class UserLoginSerializer(serializers.Serializer):
    """Serializer for user login."""

    username = serializers.CharField(required=True)
    password = serializers.CharField(
        required=True,
        write_only=True,
        style={'input_type': 'password'}
    )


class LogoutRequestSerializer(serializers.Serializer):
    refresh = serializers.CharField(required=False, help_text="Refresh token to discard")
