"""Domain exception bases and the DRF exception handler.

Module-level exceptions (``CustomerNotFound``, ...) subclass these bases
so the shared viewset can translate them into HTTP responses without
knowing every concrete class.
"""

from __future__ import annotations

from typing import Any

import structlog
from django.db import DatabaseError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = structlog.get_logger(__name__)

INTERNAL_ERROR_MESSAGE = "Error interno del servidor"


class EntityNotFound(Exception):
    """The requested record does not exist or has been soft-deleted."""


class EntityConflict(Exception):
    """The operation would break a uniqueness or integrity rule."""


class ReferenceNotFound(Exception):
    """A foreign-key identifier in the payload points to nothing."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} no existe")


def api_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """Render every error as ``{"message": ...}``.

    Persistence failures are logged with full detail server-side and
    reported to the client as a generic 500.
    """
    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.error(
            "persistence.failure",
            view=type(view).__name__ if view else None,
            error=str(exc),
            exc_info=True,
        )
        return Response(
            {"message": INTERNAL_ERROR_MESSAGE},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    response = exception_handler(exc, context)
    if response is not None and isinstance(response.data, dict):
        detail = response.data.get("detail")
        if detail is not None:
            response.data = {"message": str(detail)}
    return response
