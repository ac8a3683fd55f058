"""Session service layer.

Timestamps follow the status:

- ``started_at`` is set once, when the session is created.
- Moving to ``ended`` or ``revoked`` stamps ``ended_at`` (the first
  close wins; ``ended`` -> ``revoked`` keeps the original time).
- Moving back to ``active`` clears ``ended_at``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

import structlog
from django.utils import timezone

from portal.core.exceptions import ReferenceNotFound
from portal.sessions.exceptions import SessionNotFound
from portal.sessions.models import Session, SessionStatus

if TYPE_CHECKING:
    from datetime import datetime

    from django.db.models import QuerySet

    from portal.core.repositories.interfaces import IRepository
    from portal.sessions.dtos import CreateSessionDTO, UpdateSessionDTO

logger = structlog.get_logger(__name__)


class SessionService:
    def __init__(
        self,
        repository: IRepository,
        customers: IRepository,
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._repo = repository
        self._customers = customers
        self._clock = clock

    def _check_customer(self, customer_id: Any) -> None:
        if not self._customers.exists(customer_id):
            raise ReferenceNotFound("customer_id")

    def _sync_ended_at(self, session: Session) -> None:
        if session.is_closed:
            if session.ended_at is None:
                session.ended_at = self._clock()
        else:
            session.ended_at = None

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, dto: CreateSessionDTO) -> Session:
        """Open a session for an existing customer.

        Raises:
            ReferenceNotFound: if ``customer_id`` does not exist.
        """
        self._check_customer(dto.customer_id)

        session = Session(
            customer_id=dto.customer_id,
            user_agent=dto.user_agent,
            ip_address=dto.ip_address,
            status=dto.status or SessionStatus.ACTIVE,
            started_at=self._clock(),
        )
        self._sync_ended_at(session)

        session = self._repo.save(session)
        logger.info(
            "session.created",
            session_id=str(session.pk),
            customer_id=str(session.customer_id),
            status=session.status,
        )
        return session

    def update(self, id: str, dto: UpdateSessionDTO) -> Session:
        """Apply the supplied fields and keep ``ended_at`` consistent.

        Raises:
            SessionNotFound: if the session does not exist.
            ReferenceNotFound: if a new ``customer_id`` does not exist.
        """
        session = self.get(id)
        changes = dto.provided_fields()
        if "customer_id" in changes:
            self._check_customer(changes["customer_id"])

        previous_status = session.status
        for field, value in changes.items():
            setattr(session, field, value)
        self._sync_ended_at(session)

        session = self._repo.save(session)
        logger.info(
            "session.updated",
            session_id=str(id),
            fields=sorted(changes),
            status_from=previous_status,
            status_to=session.status,
        )
        return session

    def delete(self, id: str) -> None:
        session = self.get(id)
        self._repo.delete(session.pk)
        logger.info("session.deleted", session_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet[Session]:
        return self._repo.list(filters)

    def get(self, id: str) -> Session:
        session = self._repo.get_by_id(id)
        if not session:
            raise SessionNotFound(f"Session {id} not found.")
        return session
