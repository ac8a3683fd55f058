"""Session domain exceptions."""

from __future__ import annotations

from portal.core.exceptions import EntityNotFound


class SessionNotFound(EntityNotFound):
    """The requested session does not exist or has been soft-deleted."""
