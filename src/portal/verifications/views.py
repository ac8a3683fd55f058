"""Verification API views."""

from __future__ import annotations

from datetime import timedelta

from django.conf import settings

from portal.core.views import EntityViewSet
from portal.customers.repositories.django_repository import CustomerDjangoRepository
from portal.payments.repositories.django_repository import PaymentDjangoRepository
from portal.sessions.repositories.django_repository import SessionDjangoRepository
from portal.verifications.dtos import (
    CreateVerificationDTO,
    UpdateVerificationDTO,
    VerificationOutputDTO,
)
from portal.verifications.filters import VerificationFilter
from portal.verifications.repositories.django_repository import (
    VerificationDjangoRepository,
)
from portal.verifications.services import VerificationService


class VerificationViewSet(EntityViewSet):
    entity_name = "verification"
    not_found_message = "Verification no encontrada"
    create_dto = CreateVerificationDTO
    update_dto = UpdateVerificationDTO
    output_dto = VerificationOutputDTO

    filterset_class = VerificationFilter
    ordering_fields = ["created_at", "updated_at", "expires_at", "attempts"]

    def build_service(self) -> VerificationService:
        return VerificationService(
            repository=VerificationDjangoRepository(),
            customers=CustomerDjangoRepository(),
            sessions=SessionDjangoRepository(),
            payments=PaymentDjangoRepository(),
            ttl=timedelta(minutes=settings.VERIFICATION_TTL_MINUTES),
        )
