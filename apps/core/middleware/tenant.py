# apps/core/middleware/tenant.py
from __future__ import annotations

from django.http import JsonResponse

from apps.core.tenant import TenantResolutionError, resolve_tenant_from_request


class TenantMiddleware:
    """
    Resolves the tenant for every request and exposes it as request.tenant.

    Failures are rendered here, before any view runs.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        try:
            tenant = resolve_tenant_from_request(request)
        except TenantResolutionError as e:
            return JsonResponse(e.as_dict(), status=e.http_status)

        request.tenant = tenant
        return self.get_response(request)
