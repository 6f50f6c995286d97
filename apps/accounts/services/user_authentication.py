"""User authentication service."""

from django.db import transaction
from django.contrib.auth import get_user_model
from django.utils import timezone

from .exceptions import InvalidCredentialsError, InactiveAccountError

User = get_user_model()


@transaction.atomic
def authenticate_user(*, username: str, password: str) -> User:
    """
    Authenticate user with username and password.

    Uses select_for_update() to prevent race conditions when updating last_login.

    Args:
        username: User's username
        password: User's password

    Returns:
        Authenticated User instance

    Raises:
        InvalidCredentialsError: If credentials are invalid
        InactiveAccountError: If account is deactivated
    """
    try:
        user = (
            User.objects
            .select_for_update()
            .get(username=username)
        )
    except User.DoesNotExist:
        raise InvalidCredentialsError("Invalid username or password")

    if not user.check_password(password):
        raise InvalidCredentialsError("Invalid username or password")

    if not user.is_active:
        raise InactiveAccountError("Account is deactivated")

    user.last_login = timezone.now()
    user.save(update_fields=['last_login'])

    return user
