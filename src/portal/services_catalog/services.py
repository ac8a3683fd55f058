"""Service catalog use-cases.

The only cross-entity rule is referential: a service must point at a
live customer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog

from portal.core.exceptions import ReferenceNotFound
from portal.services_catalog.exceptions import ServiceNotFound
from portal.services_catalog.models import Service

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from portal.core.repositories.interfaces import IRepository
    from portal.services_catalog.dtos import CreateServiceDTO, UpdateServiceDTO

logger = structlog.get_logger(__name__)


class ServiceCatalogService:
    def __init__(self, repository: IRepository, customers: IRepository) -> None:
        self._repo = repository
        self._customers = customers

    def create(self, dto: CreateServiceDTO) -> Service:
        if not self._customers.exists(dto.customer_id):
            raise ReferenceNotFound("customer_id")

        service = Service(
            customer_id=dto.customer_id,
            name=dto.name,
            description=dto.description,
        )
        if dto.active is not None:
            service.active = dto.active

        service = self._repo.save(service)
        logger.info(
            "service.created",
            service_id=str(service.pk),
            customer_id=str(service.customer_id),
        )
        return service

    def update(self, id: str, dto: UpdateServiceDTO) -> Service:
        service = self.get(id)
        changes = dto.provided_fields()
        if "customer_id" in changes and not self._customers.exists(
            changes["customer_id"]
        ):
            raise ReferenceNotFound("customer_id")

        for field, value in changes.items():
            setattr(service, field, value)

        service = self._repo.save(service)
        logger.info("service.updated", service_id=str(id), fields=sorted(changes))
        return service

    def delete(self, id: str) -> None:
        service = self.get(id)
        self._repo.delete(service.pk)
        logger.info("service.deleted", service_id=str(id))

    def list(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet[Service]:
        return self._repo.list(filters)

    def get(self, id: str) -> Service:
        service = self._repo.get_by_id(id)
        if not service:
            raise ServiceNotFound(f"Service {id} not found.")
        return service
