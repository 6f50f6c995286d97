"""User registration service."""

import logging

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from .exceptions import UserRegistrationError

User = get_user_model()

logger = logging.getLogger(__name__)


@transaction.atomic
def register_user(
    *,
    username: str,
    password: str,
    display_name: str,
    avatar_initials: str = ""
) -> User:
    """
    Register a new user.

    Args:
        username: Unique login name (usually an e-mail address)
        password: User's password (will be hashed)
        display_name: Name shown in the dashboard header
        avatar_initials: Optional initials; derived from display_name if empty

    Returns:
        Created User instance

    Raises:
        UserRegistrationError: If the username is taken
    """
    if User.objects.filter(username=username).exists():
        raise UserRegistrationError(f"Username already taken: {username}")

    try:
        user = User.objects.create_user(
            username=username,
            password=password,
            display_name=display_name,
            avatar_initials=avatar_initials,
        )
    except IntegrityError as e:
        raise UserRegistrationError(f"Registration failed: {str(e)}")

    logger.info("Registered user %s", user.username)
    return user
