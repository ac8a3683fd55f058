from __future__ import annotations

import uuid
from datetime import datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from portal.core.exceptions import ReferenceNotFound
from portal.payments.dtos import CreatePaymentDTO, UpdatePaymentDTO
from portal.payments.exceptions import PaymentNotFound
from portal.payments.models import Payment, PaymentStatus
from portal.payments.services import PaymentService

pytestmark = pytest.mark.unit

NOW = datetime(2025, 1, 15, 12, 0, tzinfo=timezone.utc)


@pytest.fixture()
def repos():
    repo, customers, products = MagicMock(), MagicMock(), MagicMock()
    repo.save.side_effect = lambda p: p
    customers.exists.return_value = True
    products.exists.return_value = True
    return repo, customers, products


@pytest.fixture()
def service(repos):
    repo, customers, products = repos
    return PaymentService(
        repository=repo,
        customers=customers,
        products=products,
        default_currency="MXN",
        clock=lambda: NOW,
    )


def _create_dto(**overrides):
    data = {
        "customer_id": str(uuid.uuid4()),
        "product_id": str(uuid.uuid4()),
        "amount": "120.00",
        "method": "spei",
    }
    data.update(overrides)
    return CreatePaymentDTO.from_payload(data).value


def _payment(**overrides):
    defaults = {
        "payment_id": uuid.uuid4(),
        "customer_id": uuid.uuid4(),
        "product_id": uuid.uuid4(),
        "amount": Decimal("120.00"),
        "currency": "MXN",
        "method": "spei",
        "status": PaymentStatus.PENDING,
    }
    defaults.update(overrides)
    return Payment(**defaults)


class TestCreatePayment:
    def test_defaults(self, service):
        payment = service.create(_create_dto())

        assert payment.status == PaymentStatus.PENDING
        assert payment.currency == "MXN"
        assert payment.amount == Decimal("120.00")
        assert payment.paid_at is None

    def test_paid_on_creation_stamps_paid_at(self, service):
        payment = service.create(_create_dto(status="paid"))
        assert payment.paid_at == NOW

    def test_unknown_customer(self, service, repos):
        repo, customers, _ = repos
        customers.exists.return_value = False

        with pytest.raises(ReferenceNotFound, match="customer_id no existe"):
            service.create(_create_dto())

        repo.save.assert_not_called()

    def test_unknown_product(self, service, repos):
        _, _, products = repos
        products.exists.return_value = False

        with pytest.raises(ReferenceNotFound) as exc_info:
            service.create(_create_dto())

        assert exc_info.value.field == "product_id"


class TestUpdatePayment:
    def test_mark_paid(self, service, repos):
        repo, _, products = repos
        repo.get_by_id.return_value = _payment()

        dto = UpdatePaymentDTO.from_payload({"status": "paid"}).value
        payment = service.update(str(uuid.uuid4()), dto)

        assert payment.status == "paid"
        assert payment.paid_at == NOW
        products.exists.assert_not_called()

    def test_refund_keeps_paid_at(self, service, repos):
        repo, _, _ = repos
        earlier = datetime(2024, 12, 1, tzinfo=timezone.utc)
        repo.get_by_id.return_value = _payment(status=PaymentStatus.PAID, paid_at=earlier)

        dto = UpdatePaymentDTO.from_payload({"status": "refunded"}).value
        payment = service.update(str(uuid.uuid4()), dto)

        assert payment.paid_at == earlier

    def test_not_found(self, service, repos):
        repo, _, _ = repos
        repo.get_by_id.return_value = None

        with pytest.raises(PaymentNotFound):
            service.update(str(uuid.uuid4()), UpdatePaymentDTO())


class TestDeletePayment:
    def test_soft_deletes(self, service, repos):
        repo, _, _ = repos
        existing = _payment()
        repo.get_by_id.return_value = existing

        service.delete(str(existing.pk))

        repo.delete.assert_called_once_with(existing.pk)
