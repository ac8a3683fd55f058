"""Shared HTTP layer: health check and the CRUD viewset base.

``EntityViewSet`` wires the request pipeline used by every portal
resource::

    id_param_guard -> InputDTO.from_payload -> service -> OutputDTO

Domain exceptions raised by the services are translated here; anything
else propagates to ``api_exception_handler``.
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from typing import Any, Dict

import structlog
from django.db import connections
from django.http import HttpRequest, JsonResponse
from django.utils import timezone
from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import status
from rest_framework.filters import OrderingFilter
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.viewsets import GenericViewSet

from portal.core.dtos import InputDTO, OutputDTO
from portal.core.exceptions import EntityConflict, EntityNotFound, ReferenceNotFound
from portal.core.middleware import id_param_guard
from portal.core.validation import FieldError

logger = structlog.get_logger()

VALIDATION_ERROR_MESSAGE = "Datos de entrada inválidos"


def health_check(request: HttpRequest) -> JsonResponse:
    services: Dict[str, Dict[str, Any]] = {}
    overall_healthy = True

    # Check database
    try:
        start = time.monotonic()
        conn = connections["default"]
        conn.ensure_connection()
        with conn.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        services["database"] = {
            "status": "up",
            "response_time_ms": round((time.monotonic() - start) * 1000, 2),
        }
    except Exception:
        services["database"] = {"status": "down"}
        overall_healthy = False
        logger.error("health_check_db_failure", exc_info=True)

    status_code = 200 if overall_healthy else 503

    logger.info(
        "health_check_completed", status="healthy" if overall_healthy else "unhealthy"
    )

    return JsonResponse(
        {
            "ok": overall_healthy,
            "status": "healthy" if overall_healthy else "unhealthy",
            "timestamp": timezone.now().isoformat(),
            "services": services,
        },
        status=status_code,
    )


def validation_error_response(errors: Sequence[FieldError]) -> Response:
    return Response(
        {
            "message": VALIDATION_ERROR_MESSAGE,
            "errors": [error.as_dict() for error in errors],
        },
        status=status.HTTP_400_BAD_REQUEST,
    )


class EntityViewSet(GenericViewSet):
    """CRUD ViewSet base for portal resources.

    Subclasses provide the DTO classes, ``entity_name`` and
    ``build_service()``.  All ORM access goes through the service /
    repository layer; the ``id`` path parameter is guarded before any
    handler touches it.
    """

    entity_name: str = "recurso"
    not_found_message: str = "Recurso no encontrado"
    create_dto: type[InputDTO]
    update_dto: type[InputDTO]
    output_dto: type[OutputDTO]

    lookup_url_kwarg = "id"
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    ordering_fields = ["created_at", "updated_at"]
    ordering = ["-created_at"]

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self._service = self.build_service()

    def build_service(self):
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def get_queryset(self):
        return self._service.list()

    def _project(self, entity: Any) -> dict[str, Any]:
        return self.output_dto.from_entity(entity).as_response()

    def _not_found(self) -> Response:
        return Response(
            {"message": self.not_found_message},
            status=status.HTTP_404_NOT_FOUND,
        )

    @staticmethod
    def _client_error(exc: Exception, code: int) -> Response:
        return Response({"message": str(exc)}, status=code)

    # ------------------------------------------------------------------
    # List / Retrieve
    # ------------------------------------------------------------------

    def list(self, request: Request) -> Response:
        queryset = self.filter_queryset(self.get_queryset())
        page = self.paginate_queryset(queryset)
        if page is not None:
            return self.get_paginated_response([self._project(e) for e in page])
        return Response([self._project(e) for e in queryset])

    @id_param_guard()
    def retrieve(self, request: Request, id: str | None = None) -> Response:
        try:
            entity = self._service.get(id)
        except EntityNotFound:
            return self._not_found()
        return Response(self._project(entity))

    # ------------------------------------------------------------------
    # Create / Update / Destroy
    # ------------------------------------------------------------------

    def create(self, request: Request) -> Response:
        result = self.create_dto.from_payload(request.data)
        if not result.is_valid:
            return validation_error_response(result.errors)

        try:
            entity = self._service.create(result.value)
        except ReferenceNotFound as exc:
            return self._client_error(exc, status.HTTP_400_BAD_REQUEST)
        except EntityConflict as exc:
            return self._client_error(exc, status.HTTP_409_CONFLICT)

        return Response(self._project(entity), status=status.HTTP_201_CREATED)

    @id_param_guard()
    def update(self, request: Request, id: str | None = None) -> Response:
        result = self.update_dto.from_payload(request.data)
        if not result.is_valid:
            return validation_error_response(result.errors)

        try:
            entity = self._service.update(id, result.value)
        except EntityNotFound:
            return self._not_found()
        except ReferenceNotFound as exc:
            return self._client_error(exc, status.HTTP_400_BAD_REQUEST)
        except EntityConflict as exc:
            return self._client_error(exc, status.HTTP_409_CONFLICT)

        return Response(self._project(entity))

    def partial_update(self, request: Request, id: str | None = None) -> Response:
        return self.update(request, id=id)

    @id_param_guard()
    def destroy(self, request: Request, id: str | None = None) -> Response:
        try:
            self._service.delete(id)
        except EntityNotFound:
            return self._not_found()
        except EntityConflict as exc:
            return self._client_error(exc, status.HTTP_409_CONFLICT)
        return Response(status=status.HTTP_204_NO_CONTENT)
