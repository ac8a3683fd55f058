"""Payment API views."""

from __future__ import annotations

from django.conf import settings

from portal.core.views import EntityViewSet
from portal.customers.repositories.django_repository import CustomerDjangoRepository
from portal.payments.dtos import CreatePaymentDTO, PaymentOutputDTO, UpdatePaymentDTO
from portal.payments.filters import PaymentFilter
from portal.payments.repositories.django_repository import PaymentDjangoRepository
from portal.payments.services import PaymentService
from portal.products.repositories.django_repository import ProductDjangoRepository


class PaymentViewSet(EntityViewSet):
    entity_name = "payment"
    not_found_message = "Payment no encontrado"
    create_dto = CreatePaymentDTO
    update_dto = UpdatePaymentDTO
    output_dto = PaymentOutputDTO

    filterset_class = PaymentFilter
    ordering_fields = ["created_at", "updated_at", "amount", "paid_at"]

    def build_service(self) -> PaymentService:
        return PaymentService(
            repository=PaymentDjangoRepository(),
            customers=CustomerDjangoRepository(),
            products=ProductDjangoRepository(),
            default_currency=settings.DEFAULT_CURRENCY,
        )
