"""
Accounts app navigation

Role-gated menu of the panel. This only decides what is shown; it is not
an access control layer.
"""
from typing import Dict, List

from .models import User

ALL_ROLES = [User.ADMIN, User.MANAGER, User.EDITOR, User.USER]

NAVIGATION = [
    {'name': 'dashboard', 'label': 'Dashboard', 'href': '/', 'roles': ALL_ROLES},
    {'name': 'profile', 'label': 'My Profile', 'href': '/profile', 'roles': ALL_ROLES},
    {'name': 'users', 'label': 'Users', 'href': '/users', 'roles': [User.ADMIN]},
    {
        'name': 'documents',
        'label': 'Documents',
        'href': '/documents',
        'roles': [User.ADMIN, User.MANAGER, User.EDITOR],
    },
    {'name': 'reports', 'label': 'Reports', 'href': '/reports', 'roles': [User.ADMIN, User.MANAGER]},
    {'name': 'settings', 'label': 'Settings', 'href': '/settings', 'roles': [User.ADMIN]},
]


def navigation_for(user) -> List[Dict]:
    """
    Menu entries visible to a user.

    Args:
        user: User instance; anonymous users see nothing

    Returns:
        List of navigation items without the role lists
    """
    if not getattr(user, 'is_authenticated', False):
        return []
    role = getattr(user, 'role', None)
    return [
        {key: value for key, value in item.items() if key != 'roles'}
        for item in NAVIGATION
        if role in item['roles']
    ]


def can_access(user, name: str) -> bool:
    """Whether the menu entry `name` is shown to the user."""
    return any(item['name'] == name for item in navigation_for(user))
