"""Session API views."""

from __future__ import annotations

from portal.core.views import EntityViewSet
from portal.customers.repositories.django_repository import CustomerDjangoRepository
from portal.sessions.dtos import CreateSessionDTO, SessionOutputDTO, UpdateSessionDTO
from portal.sessions.filters import SessionFilter
from portal.sessions.repositories.django_repository import SessionDjangoRepository
from portal.sessions.services import SessionService


class SessionViewSet(EntityViewSet):
    entity_name = "session"
    not_found_message = "Session no encontrada"
    create_dto = CreateSessionDTO
    update_dto = UpdateSessionDTO
    output_dto = SessionOutputDTO

    filterset_class = SessionFilter
    ordering_fields = ["created_at", "updated_at", "started_at", "ended_at"]

    def build_service(self) -> SessionService:
        return SessionService(
            repository=SessionDjangoRepository(),
            customers=CustomerDjangoRepository(),
        )
