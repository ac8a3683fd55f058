"""Request-level middleware.

- ``CorrelationIdMiddleware``: Django middleware that tags every log line
  of a request with an ``X-Request-ID``.
- ``id_param_guard``: decorator factory that rejects malformed identifier
  path parameters before a view handler runs.
"""

from __future__ import annotations

import functools
import uuid
from contextvars import ContextVar
from typing import Any, Callable

import structlog
from django.http import HttpRequest, HttpResponse
from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response

from portal.core.validation import UUID_LENGTH

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")

logger = structlog.get_logger()


class CorrelationIdMiddleware:
    """Middleware that extracts or generates a correlation ID for each request.

    Reads X-Request-ID header from the incoming request. If absent,
    generates a new UUID4. The ID is stored in a ContextVar so structlog
    processors can inject it into every log line, and is returned to the
    client via the X-Request-ID response header.
    """

    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        cid = request.META.get("HTTP_X_REQUEST_ID") or str(uuid.uuid4())
        correlation_id_var.set(cid)

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(correlation_id=cid)

        logger.info(
            "request_started",
            method=request.method,
            path=request.get_full_path(),
        )

        response = self.get_response(request)

        logger.info(
            "request_finished",
            method=request.method,
            path=request.get_full_path(),
            status_code=response.status_code,
        )

        response["X-Request-ID"] = cid
        return response


# ---------------------------------------------------------------------------
# Route guard
# ---------------------------------------------------------------------------


def is_valid_id_param(value: Any) -> bool:
    """Minimal identifier shape check: present and UUID-sized."""
    return isinstance(value, str) and len(value) >= UUID_LENGTH


def id_param_guard(
    entity_name: str | None = None, param_name: str = "id"
) -> Callable[[Callable[..., Response]], Callable[..., Response]]:
    """Build a decorator that guards ``param_name`` on a view handler.

    On failure the wrapped handler is never called and the client gets
    ``400 {"message": "Parámetro id inválido"}``.  ``entity_name`` only
    labels the log line; when omitted the view's ``entity_name`` attribute
    is used.  The handler may still run a stricter existence check.
    """
    message = f"Parámetro {param_name} inválido"

    def decorator(handler: Callable[..., Response]) -> Callable[..., Response]:
        @functools.wraps(handler)
        def wrapper(view: Any, request: Request, *args: Any, **kwargs: Any) -> Response:
            value = kwargs.get(param_name)
            if not is_valid_id_param(value):
                logger.warning(
                    "route_guard.rejected",
                    entity=entity_name or getattr(view, "entity_name", "recurso"),
                    param=param_name,
                    value_length=len(value) if isinstance(value, str) else 0,
                )
                return Response(
                    {"message": message},
                    status=status.HTTP_400_BAD_REQUEST,
                )
            return handler(view, request, *args, **kwargs)

        return wrapper

    return decorator
