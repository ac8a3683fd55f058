"""Customer repository interface.

Extends ``IRepository[Customer]`` with the look-up required by the
unique-email rule.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Optional

from portal.core.repositories.interfaces import IRepository

if TYPE_CHECKING:
    from portal.customers.models import Customer


class ICustomerRepository(IRepository["Customer"]):
    """Repository contract for the Customer aggregate."""

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve a customer by email address."""
