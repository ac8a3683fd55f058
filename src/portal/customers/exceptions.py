"""Customer domain exceptions.

Raised by the Service Layer when business rules are violated.
``EntityViewSet`` translates them through their base classes.
"""

from __future__ import annotations

from portal.core.exceptions import EntityConflict, EntityNotFound


class CustomerNotFound(EntityNotFound):
    """The requested customer does not exist or has been soft-deleted."""


class CustomerEmailInUse(EntityConflict):
    """Another customer already owns this email address."""

    def __init__(self) -> None:
        super().__init__("El email ya está en uso por otro customer")


class CustomerHasActivePayments(EntityConflict):
    """The customer still has pending payments and cannot be removed."""

    def __init__(self) -> None:
        super().__init__(
            "No se puede eliminar el customer porque tiene pagos activos."
        )
