"""Customer DTOs for the Service Layer.

Framework-agnostic data transfer objects using Pydantic v2.
These are the contracts between the API layer (``EntityViewSet``)
and the Service layer.  DTOs are immutable (``frozen=True``).

- ``CreateCustomerDTO``: input for customer creation.
- ``UpdateCustomerDTO``: partial update, every field optional.
- ``CustomerOutputDTO``: response projection.
"""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar
from uuid import UUID

from portal.core.dtos import InputDTO, OutputDTO
from portal.core.normalizers import normalize_email, normalize_phone, to_bool
from portal.core.validation import (
    RuleTable,
    boolean,
    email_format,
    is_string,
    max_length,
    optional_rules,
    required,
)

CUSTOMER_RULES: RuleTable = {
    "name": (required(), is_string(), max_length(200)),
    "email": (required(), is_string(), max_length(254), email_format()),
    "phone": (required(), is_string(), max_length(20)),
    "address": (required(), is_string(), max_length(255)),
    "active": (boolean(),),
}

CUSTOMER_NORMALIZERS = {
    "email": normalize_email,
    "phone": normalize_phone,
    "active": to_bool,
}


# ---------------------------------------------------------------------------
# Input DTOs
# ---------------------------------------------------------------------------


class CreateCustomerDTO(InputDTO):
    """Immutable DTO for customer creation requests.

    ``email`` is lower-cased and ``phone`` normalized before the DTO is
    built, so uniqueness checks compare canonical values.
    """

    rules: ClassVar[RuleTable] = CUSTOMER_RULES
    normalizers: ClassVar[dict] = CUSTOMER_NORMALIZERS

    name: str
    email: str
    phone: str
    address: str
    active: bool | None = None


class UpdateCustomerDTO(InputDTO):
    """Immutable DTO for customer update requests.

    All fields are optional; only supplied fields will be updated.
    """

    rules: ClassVar[RuleTable] = optional_rules(CUSTOMER_RULES)
    normalizers: ClassVar[dict] = CUSTOMER_NORMALIZERS

    name: str | None = None
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    active: bool | None = None


# ---------------------------------------------------------------------------
# Output DTO
# ---------------------------------------------------------------------------


class CustomerOutputDTO(OutputDTO):
    """Immutable DTO for customer API responses."""

    customer_id: UUID
    name: str
    email: str
    phone: str
    address: str
    active: bool
    created_at: datetime
    updated_at: datetime
