"""
Accounts app models

Custom User model extending AbstractUser with a role used for navigation.
"""
from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """
    Custom user model with a panel role.

    Extends Django's AbstractUser to add:
    - role: Decides which sections of the panel are shown
    """

    ADMIN = 'admin'
    MANAGER = 'manager'
    EDITOR = 'editor'
    USER = 'user'

    ROLE_CHOICES = [
        (ADMIN, 'Admin'),
        (MANAGER, 'Manager'),
        (EDITOR, 'Editor'),
        (USER, 'User'),
    ]

    role = models.CharField(
        max_length=20,
        choices=ROLE_CHOICES,
        default=USER,
    )

    def __str__(self):
        return f"{self.username} ({self.role})"

    class Meta:
        verbose_name = 'User'
        verbose_name_plural = 'Users'
