"""Service catalog domain exceptions."""

from __future__ import annotations

from portal.core.exceptions import EntityNotFound


class ServiceNotFound(EntityNotFound):
    """The requested service does not exist or has been soft-deleted."""
