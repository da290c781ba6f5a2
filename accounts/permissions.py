"""
Accounts app permissions

Custom permissions for role-based access control.
"""
from rest_framework import permissions

from .models import User


class IsAdminOrSelf(permissions.BasePermission):
    """
    Permission that allows:
    - Staff and MIS users to access any user
    - Users to access only their own data
    """

    def has_object_permission(self, request, view, obj):
        if request.user.is_staff or request.user.role == User.MIS:
            return True

        # Users can only access their own data
        return obj == request.user


class IsCandidate(permissions.BasePermission):
    """Only candidates may edit candidate profile data."""

    message = 'Access denied. Only candidates can manage candidate data.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.role == User.CANDIDATE)


class IsMisUser(permissions.BasePermission):
    message = 'Insufficient permissions. MIS role required.'

    def has_permission(self, request, view):
        user = request.user
        return bool(user and user.is_authenticated and user.role == User.MIS)


class IsMisOrEmployer(permissions.BasePermission):
    message = 'Insufficient permissions.'

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user
            and user.is_authenticated
            and user.role in (User.MIS, User.EMPLOYER)
        )
