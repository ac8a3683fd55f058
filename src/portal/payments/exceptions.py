"""Payment domain exceptions."""

from __future__ import annotations

from portal.core.exceptions import EntityNotFound


class PaymentNotFound(EntityNotFound):
    """The requested payment does not exist or has been soft-deleted."""
