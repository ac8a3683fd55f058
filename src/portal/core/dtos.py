"""Base DTO classes shared by every portal module.

- ``InputDTO``: request body contract.  Subclasses declare a rule table
  (``rules``) and per-field ``normalizers``; ``from_payload`` runs the
  pipeline *rules -> normalizers -> model construction* and never raises
  for client mistakes.
- ``OutputDTO``: response projection.  Only the declared fields are read
  from the entity, so storage-only columns can never leak.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict

from portal.core.validation import (
    FieldError,
    RuleTable,
    ValidationResult,
    validate_fields,
)


class InputDTO(BaseModel):
    """Immutable request DTO validated through an explicit rule table."""

    model_config = ConfigDict(frozen=True, use_enum_values=True)

    rules: ClassVar[RuleTable] = {}
    normalizers: ClassVar[Mapping[str, Callable[[Any], Any]]] = {}

    @classmethod
    def from_payload(cls, payload: Any) -> ValidationResult[Self]:
        """Validate a decoded JSON body.

        Returns a ``ValidationResult`` holding either the DTO or every
        ``FieldError`` found.  Keys that are not declared in ``rules`` are
        dropped.
        """
        if not isinstance(payload, Mapping):
            return ValidationResult(errors=(FieldError("body", "invalid_type"),))

        errors = validate_fields(cls.rules, payload)
        if errors:
            return ValidationResult(errors=tuple(errors))

        data: dict[str, Any] = {}
        for name in cls.rules:
            value = payload.get(name)
            if value is None:
                continue
            normalizer = cls.normalizers.get(name)
            data[name] = normalizer(value) if normalizer else value
        return ValidationResult(value=cls(**data))

    def provided_fields(self) -> dict[str, Any]:
        """Fields the client actually sent (used for partial updates)."""
        return self.model_dump(exclude_unset=True)


class OutputDTO(BaseModel):
    """Immutable response projection built from an ORM entity."""

    model_config = ConfigDict(frozen=True, from_attributes=True)

    @classmethod
    def from_entity(cls, entity: Any) -> Self:
        return cls.model_validate(entity)

    def as_response(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
