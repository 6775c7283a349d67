# ======================================================================
# PATH: apps/core/tenant/resolver.py
# ======================================================================
from __future__ import annotations

from typing import Optional

from django.conf import settings

from apps.core.models import Tenant
from apps.core.tenant.exceptions import TenantResolutionError


def _normalize_code(v: object) -> str:
    return str(v or "").strip()


def _header_name() -> str:
    return str(getattr(settings, "TENANT_HEADER_NAME", "X-Tenant-Code") or "X-Tenant-Code").strip()


def _default_code() -> str:
    return _normalize_code(getattr(settings, "TENANT_DEFAULT_CODE", ""))


def _bypass_paths() -> list[str]:
    """
    Endpoints that do not need a tenant up front.
    - candidate endpoints: the candidate code already pins the tenant
    - token issue/refresh, admin, schema docs, health check
    """
    return list(
        getattr(
            settings,
            "TENANT_BYPASS_PATH_PREFIXES",
            [
                "/admin/",
                "/healthz/",
                "/api/v1/token/",
                "/api/v1/candidate/",
                "/swagger",
                "/redoc",
            ],
        )
    )


def is_bypass_path(path: str) -> bool:
    p = str(path or "/")
    return any(p.startswith(prefix) for prefix in _bypass_paths())


def _find_tenant(code: str, *, source: str) -> Tenant:
    tenant = Tenant.objects.filter(code=code).first()
    if tenant is None:
        raise TenantResolutionError(
            code="tenant_invalid",
            message=f"{source} tenant '{code}' not found",
            http_status=404,
        )
    if not tenant.is_active:
        raise TenantResolutionError(
            code="tenant_inactive",
            message=f"{source} tenant '{code}' is inactive",
            http_status=403,
        )
    return tenant


def resolve_tenant_from_request(request) -> Optional[Tenant]:
    """
    Returns:
      - Tenant instance, or
      - None (bypass path only)

    Raises:
      - TenantResolutionError
    """
    path = getattr(request, "path", "") or "/"
    header_name = _header_name()

    # 1) explicit header
    code = _normalize_code(request.headers.get(header_name))
    if code:
        return _find_tenant(code, source="Requested")

    # 2) settings default (single-tenant deployments)
    code = _default_code()
    if code:
        return _find_tenant(code, source="Default")

    # 3) bypass path -> allow None
    if is_bypass_path(path):
        return None

    raise TenantResolutionError(
        code="tenant_missing",
        message=f"Tenant header '{header_name}' required",
        http_status=400,
    )
