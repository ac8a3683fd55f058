"""Session DTOs.

``ip_address`` is accepted on input but deliberately absent from
``SessionOutputDTO``.  ``started_at`` and ``ended_at`` are output-only.
"""

from __future__ import annotations

from datetime import datetime
from enum import StrEnum
from typing import ClassVar
from uuid import UUID

from portal.core.dtos import InputDTO, OutputDTO
from portal.core.validation import (
    RuleTable,
    is_string,
    max_length,
    one_of,
    optional_rules,
    required,
    uuid4_format,
)


class SessionStatusEnum(StrEnum):
    ACTIVE = "active"
    ENDED = "ended"
    REVOKED = "revoked"


SESSION_RULES: RuleTable = {
    "customer_id": (required(), uuid4_format()),
    "user_agent": (required(), is_string(), max_length(255)),
    "ip_address": (is_string(), max_length(45)),
    "status": (one_of(SessionStatusEnum),),
}


class CreateSessionDTO(InputDTO):
    rules: ClassVar[RuleTable] = SESSION_RULES

    customer_id: UUID
    user_agent: str
    ip_address: str | None = None
    status: SessionStatusEnum | None = None


class UpdateSessionDTO(InputDTO):
    rules: ClassVar[RuleTable] = optional_rules(SESSION_RULES)

    customer_id: UUID | None = None
    user_agent: str | None = None
    ip_address: str | None = None
    status: SessionStatusEnum | None = None


class SessionOutputDTO(OutputDTO):
    session_id: UUID
    customer_id: UUID
    user_agent: str
    status: str
    started_at: datetime
    ended_at: datetime | None
    created_at: datetime
    updated_at: datetime
