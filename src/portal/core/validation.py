"""Field-level validation rules.

Each rule is a small closure ``rule(field, value) -> FieldError | None``.
DTOs declare an explicit table ``{field_name: (rule, rule, ...)}`` and
:func:`validate_fields` evaluates it against a raw payload, collecting
every failing field instead of stopping at the first one.

Rules are pure and stateless: they can be shared between DTO classes and
evaluated concurrently for unrelated requests.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field as dc_field
from typing import Any, Generic, TypeVar

from email_validator import EmailNotValidError, validate_email

from portal.core.normalizers import to_bool

T = TypeVar("T")

# ---------------------------------------------------------------------------
# Error records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldError:
    """A single rule violation on one field."""

    field: str
    reason: str
    limit: int | None = None
    allowed: tuple[str, ...] | None = None

    def as_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"field": self.field, "reason": self.reason}
        if self.limit is not None:
            data["limit"] = self.limit
        if self.allowed is not None:
            data["allowed"] = list(self.allowed)
        return data


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    """Outcome of validating a payload: a value or the full error list."""

    value: T | None = None
    errors: tuple[FieldError, ...] = dc_field(default_factory=tuple)

    @property
    def is_valid(self) -> bool:
        return not self.errors


Rule = Callable[[str, Any], "FieldError | None"]
RuleTable = Mapping[str, tuple[Rule, ...]]

# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------

UUID_LENGTH = 36

_UUID4_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
_CURRENCY_PATTERN = re.compile(r"^\s*[A-Za-z]{3}\s*$")


def is_absent(value: Any) -> bool:
    """``None`` and the empty string count as "not provided"."""
    return value is None or value == ""


def required() -> Rule:
    def rule(field: str, value: Any) -> FieldError | None:
        if is_absent(value):
            return FieldError(field, "required")
        return None

    rule.is_required = True  # type: ignore[attr-defined]
    return rule


def not_blank() -> Rule:
    """Present values must not be the empty string (update shapes)."""

    def rule(field: str, value: Any) -> FieldError | None:
        if value == "":
            return FieldError(field, "required")
        return None

    return rule


def is_string() -> Rule:
    def rule(field: str, value: Any) -> FieldError | None:
        if not isinstance(value, str):
            return FieldError(field, "invalid_type")
        return None

    return rule


def max_length(limit: int) -> Rule:
    def rule(field: str, value: Any) -> FieldError | None:
        if isinstance(value, str) and len(value) > limit:
            return FieldError(field, "max_length", limit=limit)
        return None

    return rule


def email_format() -> Rule:
    """Syntactic check only, no DNS lookups."""

    def rule(field: str, value: Any) -> FieldError | None:
        try:
            validate_email(str(value), check_deliverability=False)
        except EmailNotValidError:
            return FieldError(field, "invalid_format")
        return None

    return rule


def uuid4_format() -> Rule:
    """Canonical 36-character hyphenated UUID, version 4."""

    def rule(field: str, value: Any) -> FieldError | None:
        if not isinstance(value, str) or not _UUID4_PATTERN.match(value):
            return FieldError(field, "invalid_format")
        return None

    return rule


def one_of(allowed: Iterable[str]) -> Rule:
    choices = tuple(str(choice) for choice in allowed)

    def rule(field: str, value: Any) -> FieldError | None:
        if value not in choices:
            return FieldError(field, "invalid_enum", allowed=choices)
        return None

    return rule


def boolean() -> Rule:
    def rule(field: str, value: Any) -> FieldError | None:
        try:
            to_bool(value)
        except ValueError:
            return FieldError(field, "invalid_boolean")
        return None

    return rule


def integer(min_value: int | None = None, max_value: int | None = None) -> Rule:
    def rule(field: str, value: Any) -> FieldError | None:
        # bool is an int subclass; ``true`` is not a count.
        if isinstance(value, bool) or not isinstance(value, int):
            return FieldError(field, "invalid_integer")
        if min_value is not None and value < min_value:
            return FieldError(field, "min_value", limit=min_value)
        if max_value is not None and value > max_value:
            return FieldError(field, "max_value", limit=max_value)
        return None

    return rule


def decimal_string(max_digits: int, decimal_places: int) -> Rule:
    """Plain decimal notation that fits a ``DECIMAL(max_digits, decimal_places)``."""
    integer_digits = max_digits - decimal_places
    pattern = re.compile(
        rf"^\d{{1,{integer_digits}}}(\.\d{{1,{decimal_places}}})?$"
    )

    def rule(field: str, value: Any) -> FieldError | None:
        if not isinstance(value, str) or not pattern.match(value):
            return FieldError(field, "invalid_format")
        return None

    return rule


def currency_code() -> Rule:
    def rule(field: str, value: Any) -> FieldError | None:
        if not isinstance(value, str) or not _CURRENCY_PATTERN.match(value):
            return FieldError(field, "invalid_format")
        return None

    return rule


# ---------------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------------


def _is_required(rule: Rule) -> bool:
    return getattr(rule, "is_required", False)


def optional_rules(rules: RuleTable) -> dict[str, tuple[Rule, ...]]:
    """Same table for update shapes: each ``required()`` becomes ``not_blank()``.

    The field may be omitted, but a field that is mandatory on create
    cannot be blanked out by an update.
    """
    return {
        name: tuple(
            not_blank() if _is_required(rule) else rule for rule in field_rules
        )
        for name, field_rules in rules.items()
    }


def validate_fields(rules: RuleTable, payload: Mapping[str, Any]) -> list[FieldError]:
    """Evaluate ``rules`` against ``payload`` and return every failure.

    Fields are visited in table order.  A field that is absent and not
    required is skipped.  Within one field, evaluation stops at the first
    failing rule so that type errors do not cascade into length errors.
    """
    errors: list[FieldError] = []
    for name, field_rules in rules.items():
        value = payload.get(name)
        mandatory = any(_is_required(rule) for rule in field_rules)
        if value is None and not mandatory:
            continue
        for rule in field_rules:
            error = rule(name, value)
            if error is not None:
                errors.append(error)
                break
    return errors
