"""Verification service layer.

Business rules enforced here:
- ``customer_id``, ``session_id`` and ``payment_id`` must reference live
  records (checked in that order; the first missing one is reported).
- A new verification expires ``ttl`` after creation.
- ``verified_at`` is stamped the first time the status becomes
  ``approved``.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

import structlog
from django.utils import timezone

from portal.core.exceptions import ReferenceNotFound
from portal.verifications.exceptions import VerificationNotFound
from portal.verifications.models import Verification, VerificationStatus

if TYPE_CHECKING:
    from datetime import datetime

    from django.db.models import QuerySet

    from portal.core.repositories.interfaces import IRepository
    from portal.verifications.dtos import (
        CreateVerificationDTO,
        UpdateVerificationDTO,
    )

logger = structlog.get_logger(__name__)

REFERENCE_FIELDS = ("customer_id", "session_id", "payment_id")


class VerificationService:
    def __init__(
        self,
        repository: IRepository,
        customers: IRepository,
        sessions: IRepository,
        payments: IRepository,
        ttl: timedelta = timedelta(minutes=15),
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._repo = repository
        self._references = {
            "customer_id": customers,
            "session_id": sessions,
            "payment_id": payments,
        }
        self._ttl = ttl
        self._clock = clock

    def _check_references(self, values: Dict[str, Any]) -> None:
        for field in REFERENCE_FIELDS:
            value = values.get(field)
            if value is not None and not self._references[field].exists(value):
                raise ReferenceNotFound(field)

    def _stamp_verified(self, verification: Verification) -> None:
        if (
            verification.status == VerificationStatus.APPROVED
            and verification.verified_at is None
        ):
            verification.verified_at = self._clock()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, dto: CreateVerificationDTO) -> Verification:
        """Start a verification.

        Raises:
            ReferenceNotFound: if any referenced record does not exist.
        """
        self._check_references(dto.model_dump(include=set(REFERENCE_FIELDS)))

        now = self._clock()
        verification = Verification(
            customer_id=dto.customer_id,
            session_id=dto.session_id,
            payment_id=dto.payment_id,
            type=dto.type,
            attempts=dto.attempts,
            status=dto.status or VerificationStatus.PENDING,
            expires_at=now + self._ttl,
        )
        self._stamp_verified(verification)

        verification = self._repo.save(verification)
        logger.info(
            "verification.created",
            verification_id=str(verification.pk),
            customer_id=str(verification.customer_id),
            type=verification.type,
        )
        return verification

    def update(self, id: str, dto: UpdateVerificationDTO) -> Verification:
        """Apply the supplied fields to an existing verification.

        Raises:
            VerificationNotFound: if the verification does not exist.
            ReferenceNotFound: if a new reference does not exist.
        """
        verification = self.get(id)
        changes = dto.provided_fields()
        self._check_references(changes)

        for field, value in changes.items():
            setattr(verification, field, value)
        self._stamp_verified(verification)

        verification = self._repo.save(verification)
        logger.info(
            "verification.updated",
            verification_id=str(id),
            fields=sorted(changes),
            status=verification.status,
        )
        return verification

    def delete(self, id: str) -> None:
        verification = self.get(id)
        self._repo.delete(verification.pk)
        logger.info("verification.deleted", verification_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(
        self, filters: Optional[Dict[str, Any]] = None
    ) -> QuerySet[Verification]:
        return self._repo.list(filters)

    def get(self, id: str) -> Verification:
        verification = self._repo.get_by_id(id)
        if not verification:
            raise VerificationNotFound(f"Verification {id} not found.")
        return verification
