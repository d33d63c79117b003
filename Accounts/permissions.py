from rest_framework.permissions import BasePermission

from .identity import get_identity_provider


class IsBookingAdmin(BasePermission):
    """
    Allows access only to users on the admin allowlist.
    """
    message = "Only admins can perform this action"

    def has_permission(self, request, view):
        return get_identity_provider().is_admin(request.user)


class IsBookingAdminOrReadOnly(IsBookingAdmin):

    def has_permission(self, request, view):
        if request.method in ("GET", "HEAD", "OPTIONS"):
            return True
        return super().has_permission(request, view)
