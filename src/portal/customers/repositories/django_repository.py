"""Django ORM implementation of the Customer repository."""

from __future__ import annotations

from typing import Optional

from portal.core.repositories.django_repository import DjangoRepository
from portal.customers.models import Customer
from portal.customers.repositories.interfaces import ICustomerRepository


class CustomerDjangoRepository(DjangoRepository[Customer], ICustomerRepository):
    """Concrete Customer repository backed by Django ORM."""

    model = Customer

    def get_by_email(self, email: str) -> Optional[Customer]:
        """Retrieve a customer by email address.

        Soft-deleted rows are included: the unique index still covers them.
        """
        return (
            Customer.objects.using(self._using)
            .filter(email__iexact=email)
            .first()
        )
