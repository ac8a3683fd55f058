"""Payment service layer.

Business rules enforced here:
- ``customer_id`` and ``product_id`` must reference live records.
- ``status`` defaults to ``pending`` and ``currency`` to the configured
  default currency.
- ``paid_at`` is stamped the first time a payment becomes ``paid``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

import structlog
from django.utils import timezone

from portal.core.exceptions import ReferenceNotFound
from portal.payments.exceptions import PaymentNotFound
from portal.payments.models import Payment, PaymentStatus

if TYPE_CHECKING:
    from datetime import datetime

    from django.db.models import QuerySet

    from portal.core.repositories.interfaces import IRepository
    from portal.payments.dtos import CreatePaymentDTO, UpdatePaymentDTO
    from portal.payments.repositories.interfaces import IPaymentRepository

logger = structlog.get_logger(__name__)


class PaymentService:
    def __init__(
        self,
        repository: IPaymentRepository,
        customers: IRepository,
        products: IRepository,
        default_currency: str = "MXN",
        clock: Callable[[], datetime] = timezone.now,
    ) -> None:
        self._repo = repository
        self._customers = customers
        self._products = products
        self._default_currency = default_currency
        self._clock = clock

    def _check_references(self, customer_id: Any, product_id: Any) -> None:
        if customer_id is not None and not self._customers.exists(customer_id):
            raise ReferenceNotFound("customer_id")
        if product_id is not None and not self._products.exists(product_id):
            raise ReferenceNotFound("product_id")

    def _stamp_paid(self, payment: Payment) -> None:
        if payment.status == PaymentStatus.PAID and payment.paid_at is None:
            payment.paid_at = self._clock()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, dto: CreatePaymentDTO) -> Payment:
        """Register a payment.

        Raises:
            ReferenceNotFound: if the customer or product does not exist.
        """
        self._check_references(dto.customer_id, dto.product_id)

        payment = Payment(
            customer_id=dto.customer_id,
            product_id=dto.product_id,
            amount=dto.amount,
            currency=dto.currency or self._default_currency,
            method=dto.method,
            status=dto.status or PaymentStatus.PENDING,
            external_ref=dto.external_ref,
        )
        self._stamp_paid(payment)

        payment = self._repo.save(payment)
        logger.info(
            "payment.created",
            payment_id=str(payment.pk),
            customer_id=str(payment.customer_id),
            status=payment.status,
        )
        return payment

    def update(self, id: str, dto: UpdatePaymentDTO) -> Payment:
        """Apply the supplied fields to an existing payment.

        Raises:
            PaymentNotFound: if the payment does not exist.
            ReferenceNotFound: if a new customer or product does not exist.
        """
        payment = self.get(id)
        changes = dto.provided_fields()
        self._check_references(changes.get("customer_id"), changes.get("product_id"))

        for field, value in changes.items():
            setattr(payment, field, value)
        self._stamp_paid(payment)

        payment = self._repo.save(payment)
        logger.info(
            "payment.updated",
            payment_id=str(id),
            fields=sorted(changes),
            status=payment.status,
        )
        return payment

    def delete(self, id: str) -> None:
        payment = self.get(id)
        self._repo.delete(payment.pk)
        logger.info("payment.deleted", payment_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet[Payment]:
        return self._repo.list(filters)

    def get(self, id: str) -> Payment:
        """Raises ``PaymentNotFound`` for unknown or deleted payments."""
        payment = self._repo.get_by_id(id)
        if not payment:
            raise PaymentNotFound(f"Payment {id} not found.")
        return payment
