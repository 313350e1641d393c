"""
Role-based permission classes shared by the Spontan apps.
"""
from rest_framework.permissions import BasePermission


class IsBarman(BasePermission):
    """
    Permission: only barman accounts.

    Usage:
        @permission_classes([IsAuthenticated, IsBarman])
        def verify_pickup(request):
            ...
    """

    message = 'Only barman accounts can perform this action.'

    def has_permission(self, request, view):
        return bool(request.user and request.user.is_authenticated and request.user.is_barman)
