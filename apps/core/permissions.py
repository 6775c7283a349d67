# apps/core/permissions.py

from rest_framework.permissions import BasePermission

from apps.core.models import TenantMembership


class TenantResolvedAndStaff(BasePermission):
    """
    Staff-only endpoints scoped to the resolved tenant.
    - tenant must be resolved by TenantMiddleware
    - superusers pass; others need an active staff membership in that tenant
    """
    message = "Staff membership in the resolved tenant required."

    def has_permission(self, request, view):
        user = request.user
        tenant = getattr(request, "tenant", None)
        if not (user and user.is_authenticated and tenant is not None):
            return False
        if user.is_superuser:
            return True
        return TenantMembership.is_staff_of(user=user, tenant=tenant)
