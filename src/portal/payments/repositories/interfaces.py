"""Payment repository interface."""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any

from portal.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from portal.payments.models import Payment


class IPaymentRepository(IRepository["Payment"]):
    """Repository contract for payments."""

    @abstractmethod
    def count_pending_for_customer(self, customer_id: Any) -> int:
        """Number of live ``pending`` payments owned by ``customer_id``."""
