"""Payment DTOs.

``amount`` is validated as a plain decimal string and converted to
``Decimal`` only inside the DTO; the output projection renders it back
as a string with exactly two decimal places.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from enum import StrEnum
from typing import ClassVar
from uuid import UUID

from pydantic import field_validator

from portal.core.dtos import InputDTO, OutputDTO
from portal.core.normalizers import normalize_currency
from portal.core.validation import (
    RuleTable,
    currency_code,
    decimal_string,
    is_string,
    max_length,
    one_of,
    optional_rules,
    required,
    uuid4_format,
)


class PaymentStatusEnum(StrEnum):
    """Lifecycle of a payment (framework-agnostic, NOT Django TextChoices)."""

    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


PAYMENT_RULES: RuleTable = {
    "customer_id": (required(), uuid4_format()),
    "product_id": (required(), uuid4_format()),
    "amount": (required(), decimal_string(max_digits=12, decimal_places=2)),
    "currency": (currency_code(),),
    "method": (required(), is_string(), max_length(50)),
    "status": (one_of(PaymentStatusEnum),),
    "external_ref": (is_string(), max_length(100)),
}

PAYMENT_NORMALIZERS = {
    "amount": Decimal,
    "currency": normalize_currency,
}


class CreatePaymentDTO(InputDTO):
    rules: ClassVar[RuleTable] = PAYMENT_RULES
    normalizers: ClassVar[dict] = PAYMENT_NORMALIZERS

    customer_id: UUID
    product_id: UUID
    amount: Decimal
    method: str
    currency: str | None = None
    status: PaymentStatusEnum | None = None
    external_ref: str | None = None


class UpdatePaymentDTO(InputDTO):
    """All fields optional; only supplied fields are applied."""

    rules: ClassVar[RuleTable] = optional_rules(PAYMENT_RULES)
    normalizers: ClassVar[dict] = PAYMENT_NORMALIZERS

    customer_id: UUID | None = None
    product_id: UUID | None = None
    amount: Decimal | None = None
    method: str | None = None
    currency: str | None = None
    status: PaymentStatusEnum | None = None
    external_ref: str | None = None


class PaymentOutputDTO(OutputDTO):
    """Response projection; ``amount`` is always a two-decimal string."""

    payment_id: UUID
    customer_id: UUID
    product_id: UUID
    amount: str
    currency: str
    method: str
    status: str
    external_ref: str | None
    paid_at: datetime | None
    created_at: datetime
    updated_at: datetime

    @field_validator("amount", mode="before")
    @classmethod
    def format_amount(cls, value: object) -> str:
        if isinstance(value, Decimal):
            return f"{value:.2f}"
        return value  # type: ignore[return-value]
