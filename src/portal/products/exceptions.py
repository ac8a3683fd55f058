"""Product domain exceptions."""

from __future__ import annotations

from portal.core.exceptions import EntityNotFound


class ProductNotFound(EntityNotFound):
    """The requested product does not exist or has been soft-deleted."""
