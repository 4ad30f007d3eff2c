"""
Role based permission classes.
"""
from rest_framework.permissions import BasePermission

from .models import User


def is_admin(user) -> bool:
    return bool(user and user.is_authenticated and getattr(user, "role", None) == User.ROLE_ADMIN)


class IsAdminRole(BasePermission):
    """Allow access only to users with the admin role."""
    def has_permission(self, request, view) -> bool:  # type: ignore[override]
        return is_admin(getattr(request, "user", None))
