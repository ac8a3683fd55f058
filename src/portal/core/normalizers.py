"""Value normalizers applied to DTO fields before persistence.

All functions are pure and idempotent: ``f(f(x)) == f(x)``.
"""

from __future__ import annotations

import re
from typing import Any

_NON_DIGITS = re.compile(r"\D")

_TRUE_VALUES = frozenset({"true", "1"})
_FALSE_VALUES = frozenset({"false", "0"})


def normalize_phone(raw_phone: str | None) -> str:
    """Keep only digits and an optional leading ``+``.

    Examples::

        "55 1234-5678"        -> "5512345678"
        "+52 (55) 1234-5678"  -> "+525512345678"
        ""                    -> ""
    """
    if not raw_phone:
        return ""
    trimmed = raw_phone.strip()
    if trimmed.startswith("+"):
        return "+" + _NON_DIGITS.sub("", trimmed[1:])
    return _NON_DIGITS.sub("", trimmed)


def to_bool(value: Any) -> bool:
    """Coerce JSON-ish boolean representations.

    Accepts ``True``/``False``, ``0``/``1`` and the strings
    ``"true"``/``"false"``/``"1"``/``"0"`` (case-insensitive).

    Raises:
        ValueError: if ``value`` has no boolean reading.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    raise ValueError(f"{value!r} is not a boolean value.")


def normalize_email(value: str) -> str:
    return value.strip().lower()


def normalize_currency(value: str) -> str:
    return value.strip().upper()
