# apps/core/permissions.py

from rest_framework.permissions import BasePermission


def _role(user) -> str:
    return str(getattr(user, "role", "") or "").upper()


class IsAdminRole(BasePermission):
    """
    ADMIN role only
    """
    message = "Administrator access required."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and _role(user) == "ADMIN")


class IsStudentRole(BasePermission):
    """
    STUDENT role only
    """
    message = "Student account required."

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and _role(user) == "STUDENT")


class IsAdminOrReadOnly(BasePermission):
    """Any authenticated user may read; writes need ADMIN."""
    message = "Administrator access required."

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        if request.method in ("GET", "HEAD", "OPTIONS"):
            return True
        return _role(user) == "ADMIN"
