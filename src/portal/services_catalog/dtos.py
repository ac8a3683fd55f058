"""Service DTOs (create / update / response)."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar
from uuid import UUID

from portal.core.dtos import InputDTO, OutputDTO
from portal.core.normalizers import to_bool
from portal.core.validation import (
    RuleTable,
    boolean,
    is_string,
    max_length,
    optional_rules,
    required,
    uuid4_format,
)

SERVICE_RULES: RuleTable = {
    "customer_id": (required(), uuid4_format()),
    "name": (required(), is_string(), max_length(150)),
    "description": (required(), is_string(), max_length(255)),
    "active": (boolean(),),
}


class CreateServiceDTO(InputDTO):
    rules: ClassVar[RuleTable] = SERVICE_RULES
    normalizers: ClassVar[dict] = {"active": to_bool}

    customer_id: UUID
    name: str
    description: str
    active: bool | None = None


class UpdateServiceDTO(InputDTO):
    rules: ClassVar[RuleTable] = optional_rules(SERVICE_RULES)
    normalizers: ClassVar[dict] = {"active": to_bool}

    customer_id: UUID | None = None
    name: str | None = None
    description: str | None = None
    active: bool | None = None


class ServiceOutputDTO(OutputDTO):
    service_id: UUID
    customer_id: UUID
    name: str
    description: str
    active: bool
    created_at: datetime
    updated_at: datetime
