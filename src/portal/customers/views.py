"""Customer API views."""

from __future__ import annotations

from portal.core.views import EntityViewSet
from portal.customers.dtos import (
    CreateCustomerDTO,
    CustomerOutputDTO,
    UpdateCustomerDTO,
)
from portal.customers.filters import CustomerFilter
from portal.customers.repositories.django_repository import CustomerDjangoRepository
from portal.customers.services import CustomerService
from portal.payments.repositories.django_repository import PaymentDjangoRepository


class CustomerViewSet(EntityViewSet):
    """ViewSet for Customer CRUD operations.

    Uses ``CustomerService`` with ``CustomerDjangoRepository`` (DIP).
    """

    entity_name = "customer"
    not_found_message = "Customer no encontrado"
    create_dto = CreateCustomerDTO
    update_dto = UpdateCustomerDTO
    output_dto = CustomerOutputDTO

    filterset_class = CustomerFilter
    ordering_fields = ["created_at", "updated_at", "name", "email"]

    def build_service(self) -> CustomerService:
        return CustomerService(
            repository=CustomerDjangoRepository(),
            payments=PaymentDjangoRepository(),
        )
