from __future__ import annotations

from decimal import Decimal

import pytest

from portal.payments.dtos import CreatePaymentDTO, PaymentOutputDTO, UpdatePaymentDTO

pytestmark = pytest.mark.unit

CUSTOMER_ID = "583e2f58-e0b6-4fd2-adb1-c6b948fe32ad"
PRODUCT_ID = "9b1deb4d-3b7d-4bad-9bdd-2b0d7b3dcb6d"


def _payload(**overrides):
    data = {
        "customer_id": CUSTOMER_ID,
        "product_id": PRODUCT_ID,
        "amount": "199.90",
        "method": "card",
    }
    data.update(overrides)
    return data


class TestCreatePaymentDTO:
    def test_valid_payload_keeps_exact_amount(self):
        dto = CreatePaymentDTO.from_payload(_payload(currency=" usd ")).value
        assert dto.amount == Decimal("199.90")
        assert dto.currency == "USD"
        assert dto.status is None

    def test_missing_fields_collected(self):
        result = CreatePaymentDTO.from_payload({"amount": "10"})
        assert [e.field for e in result.errors] == ["customer_id", "product_id", "method"]

    @pytest.mark.parametrize("amount", [199.9, "1,000.00", "10.005"])
    def test_amount_must_be_decimal_string(self, amount):
        result = CreatePaymentDTO.from_payload(_payload(amount=amount))
        assert [(e.field, e.reason) for e in result.errors] == [
            ("amount", "invalid_format")
        ]

    def test_status_outside_enum_rejected(self):
        result = CreatePaymentDTO.from_payload(_payload(status="completed"))
        error = result.errors[0].as_dict()
        assert error["reason"] == "invalid_enum"
        assert error["allowed"] == ["pending", "paid", "failed", "refunded"]

    def test_status_accepted(self):
        dto = CreatePaymentDTO.from_payload(_payload(status="paid")).value
        assert dto.status == "paid"

    def test_customer_id_must_be_uuid4(self):
        result = CreatePaymentDTO.from_payload(_payload(customer_id="abc"))
        assert [(e.field, e.reason) for e in result.errors] == [
            ("customer_id", "invalid_format")
        ]


class TestUpdatePaymentDTO:
    def test_empty_object_is_valid(self):
        assert UpdatePaymentDTO.from_payload({}).is_valid

    def test_only_status(self):
        dto = UpdatePaymentDTO.from_payload({"status": "refunded"}).value
        assert dto.provided_fields() == {"status": "refunded"}


class TestPaymentOutputDTO:
    def test_amount_rendered_as_two_decimal_string(self, payment):
        payment.amount = Decimal("50.5")
        data = PaymentOutputDTO.from_entity(payment).as_response()
        assert data["amount"] == "50.50"
        assert data["customer_id"] == str(payment.customer_id)
        assert "deleted_at" not in data
