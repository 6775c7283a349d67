from .tenant import Tenant
from .tenant_membership import TenantMembership

__all__ = [
    "Tenant",
    "TenantMembership",
]
