# ======================================================================
# PATH: apps/core/tenant/__init__.py
# ======================================================================
from .resolver import resolve_tenant_from_request
from .exceptions import TenantResolutionError

__all__ = [
    "resolve_tenant_from_request",
    "TenantResolutionError",
]
