"""User lookup helpers."""

from typing import Optional

from django.contrib.auth import get_user_model

User = get_user_model()


def get_user(*, user_id: int) -> Optional[User]:
    """Return the user with this id, or None."""
    return User.objects.filter(id=user_id).first()


def get_user_by_username(*, username: str) -> Optional[User]:
    """Return the user with this username, or None."""
    return User.objects.filter(username=username).first()
