"""Verification domain exceptions."""

from __future__ import annotations

from portal.core.exceptions import EntityNotFound


class VerificationNotFound(EntityNotFound):
    """The requested verification does not exist or has been soft-deleted."""
