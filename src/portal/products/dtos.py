"""Product DTOs.

- ``CreateProductDTO``: ``customer_id``, ``name`` and ``description``
  are mandatory; ``active`` is optional.
- ``UpdateProductDTO``: same fields, all optional.
- ``ProductOutputDTO``: response projection.
"""

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

PRODUCT_RULES: RuleTable = {
    "customer_id": (required(), uuid4_format()),
    "name": (required(), is_string(), max_length(150)),
    "description": (required(), is_string(), max_length(255)),
    "active": (boolean(),),
}


class CreateProductDTO(InputDTO):
    rules: ClassVar[RuleTable] = PRODUCT_RULES
    normalizers: ClassVar[dict] = {"active": to_bool}

    customer_id: UUID
    name: str
    description: str
    active: bool | None = None


class UpdateProductDTO(InputDTO):
    rules: ClassVar[RuleTable] = optional_rules(PRODUCT_RULES)
    normalizers: ClassVar[dict] = {"active": to_bool}

    customer_id: UUID | None = None
    name: str | None = None
    description: str | None = None
    active: bool | None = None


class ProductOutputDTO(OutputDTO):
    product_id: UUID
    customer_id: UUID
    name: str
    description: str
    active: bool
    created_at: datetime
    updated_at: datetime
