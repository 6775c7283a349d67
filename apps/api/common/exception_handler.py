# apps/api/common/exception_handler.py
# DRF EXCEPTION_HANDLER: domain errors -> {"code", "detail"} with their own status.
from __future__ import annotations

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler

from apps.domains.assignments.exceptions import ExamSessionError

logger = logging.getLogger(__name__)


def api_exception_handler(exc, context):
    if isinstance(exc, ExamSessionError):
        view = context.get("view")
        logger.info(
            "domain error code=%s status=%s view=%s",
            exc.code,
            exc.http_status,
            view.__class__.__name__ if view is not None else "-",
        )
        return Response(exc.as_dict(), status=exc.http_status)

    if isinstance(exc, DjangoValidationError):
        if hasattr(exc, "message_dict"):
            detail = exc.message_dict
        else:
            detail = {"detail": exc.messages}
        return Response(detail, status=400)

    return drf_exception_handler(exc, context)
