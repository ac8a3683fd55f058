"""Django ORM implementation of the Payment repository."""

from __future__ import annotations

from typing import Any

from portal.core.repositories.django_repository import DjangoRepository
from portal.payments.models import Payment, PaymentStatus
from portal.payments.repositories.interfaces import IPaymentRepository


class PaymentDjangoRepository(DjangoRepository[Payment], IPaymentRepository):
    model = Payment

    def count_pending_for_customer(self, customer_id: Any) -> int:
        return (
            self._alive()
            .filter(customer_id=customer_id, status=PaymentStatus.PENDING)
            .count()
        )
