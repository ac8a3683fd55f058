"""Service catalog API views."""

from __future__ import annotations

from portal.core.views import EntityViewSet
from portal.customers.repositories.django_repository import CustomerDjangoRepository
from portal.services_catalog.dtos import (
    CreateServiceDTO,
    ServiceOutputDTO,
    UpdateServiceDTO,
)
from portal.services_catalog.filters import ServiceFilter
from portal.services_catalog.repositories.django_repository import (
    ServiceDjangoRepository,
)
from portal.services_catalog.services import ServiceCatalogService


class ServiceViewSet(EntityViewSet):
    entity_name = "service"
    not_found_message = "Service no encontrado"
    create_dto = CreateServiceDTO
    update_dto = UpdateServiceDTO
    output_dto = ServiceOutputDTO

    filterset_class = ServiceFilter
    ordering_fields = ["created_at", "updated_at", "name"]

    def build_service(self) -> ServiceCatalogService:
        return ServiceCatalogService(
            repository=ServiceDjangoRepository(),
            customers=CustomerDjangoRepository(),
        )
