"""
Custom permission classes for orders.
"""
from rest_framework.permissions import BasePermission


class IsOrderOwnerOrBarman(BasePermission):
    """
    Permission: order owner or any barman.

    Clients only ever see their own orders; barmen see all of them.
    """

    message = 'You do not have permission to access this order.'

    def has_object_permission(self, request, view, obj):
        if request.user.is_barman:
            return True
        return obj.user_id == request.user.id
