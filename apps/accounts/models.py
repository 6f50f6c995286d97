from django.contrib.auth.models import AbstractBaseUser, BaseUserManager, PermissionsMixin
from django.db import models


class UserManager(BaseUserManager):
    """Custom user manager for username-based authentication."""

    def create_user(self, username, password=None, **extra_fields):
        if not username:
            raise ValueError('Username is required')

        user = self.model(username=username, **extra_fields)
        if not user.avatar_initials:
            user.avatar_initials = initials_for(user.display_name or username)
        user.set_password(password)
        user.save(using=self._db)
        return user

    def create_superuser(self, username, password=None, **extra_fields):
        extra_fields.setdefault('is_staff', True)
        extra_fields.setdefault('is_superuser', True)

        if extra_fields.get('is_staff') is not True:
            raise ValueError('Superuser must have is_staff=True')
        if extra_fields.get('is_superuser') is not True:
            raise ValueError('Superuser must have is_superuser=True')

        return self.create_user(username, password, **extra_fields)


def initials_for(name):
    """'Marie Nováková' -> 'MN'."""
    parts = [part for part in name.replace('@', ' ').split() if part]
    return ''.join(part[0] for part in parts[:2]).upper()


class User(AbstractBaseUser, PermissionsMixin):
    """Application user. The username is usually an e-mail address."""

    username = models.CharField(unique=True, max_length=255, db_index=True)
    display_name = models.CharField(max_length=100)
    avatar_initials = models.CharField(max_length=4, blank=True)

    # Permissions
    is_active = models.BooleanField(default=True)
    is_staff = models.BooleanField(default=False)

    # Timestamps
    created_at = models.DateTimeField(auto_now_add=True)

    objects = UserManager()

    USERNAME_FIELD = 'username'
    REQUIRED_FIELDS = ['display_name']

    class Meta:
        db_table = 'users'

    def __str__(self):
        return self.username

    def get_display_name(self):
        """Return display name or the username prefix."""
        return self.display_name or self.username.split('@')[0]
