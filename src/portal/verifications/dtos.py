"""Verification DTOs.

``expires_at`` and ``verified_at`` are server-assigned and appear only
in the output projection.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import ClassVar
from uuid import UUID

from portal.core.dtos import InputDTO, OutputDTO
from portal.core.validation import (
    RuleTable,
    integer,
    is_string,
    max_length,
    one_of,
    optional_rules,
    required,
    uuid4_format,
)


# Upper bound of the PositiveIntegerField column on every supported backend.
MAX_ATTEMPTS = 2147483647


class VerificationStatusEnum(StrEnum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    EXPIRED = "expired"


VERIFICATION_RULES: RuleTable = {
    "customer_id": (required(), uuid4_format()),
    "session_id": (required(), uuid4_format()),
    "payment_id": (required(), uuid4_format()),
    "type": (required(), is_string(), max_length(30)),
    "status": (one_of(VerificationStatusEnum),),
    "attempts": (required(), integer(min_value=0, max_value=MAX_ATTEMPTS)),
}


class CreateVerificationDTO(InputDTO):
    rules: ClassVar[RuleTable] = VERIFICATION_RULES

    customer_id: UUID
    session_id: UUID
    payment_id: UUID
    type: str
    attempts: int
    status: VerificationStatusEnum | None = None


class UpdateVerificationDTO(InputDTO):
    rules: ClassVar[RuleTable] = optional_rules(VERIFICATION_RULES)

    customer_id: UUID | None = None
    session_id: UUID | None = None
    payment_id: UUID | None = None
    type: str | None = None
    attempts: int | None = None
    status: VerificationStatusEnum | None = None


class VerificationOutputDTO(OutputDTO):
    verification_id: UUID
    customer_id: UUID
    session_id: UUID
    payment_id: UUID
    type: str
    status: str
    attempts: int
    expires_at: datetime
    verified_at: datetime | None
    created_at: datetime
    updated_at: datetime
