"""Customer service layer (Use Cases).

Orchestrates business logic for the Customer aggregate, delegating
persistence to the injected repositories.

Business rules enforced here:
- Email must be unique among customers (on create, and on update when
  the address changes).
- A customer with pending payments cannot be deleted.
- Delete is a soft delete via the repository.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog
from django.db import IntegrityError

from portal.customers.exceptions import (
    CustomerEmailInUse,
    CustomerHasActivePayments,
    CustomerNotFound,
)
from portal.customers.models import Customer

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from portal.customers.dtos import CreateCustomerDTO, UpdateCustomerDTO
    from portal.customers.repositories.interfaces import ICustomerRepository
    from portal.payments.repositories.interfaces import IPaymentRepository

logger = structlog.get_logger(__name__)


class CustomerService:
    """Application service for Customer use-cases.

    Receives its repositories via constructor injection (DIP).  The
    payment repository is only consulted by ``delete``.
    """

    def __init__(
        self,
        repository: ICustomerRepository,
        payments: IPaymentRepository,
    ) -> None:
        self._repo = repository
        self._payments = payments

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, dto: CreateCustomerDTO) -> Customer:
        """Create a new customer after enforcing the unique-email rule.

        Raises:
            CustomerEmailInUse: if the email already belongs to a customer.
        """
        if self._repo.get_by_email(dto.email):
            logger.warning("customer.duplicate_email")
            raise CustomerEmailInUse()

        customer = Customer(
            name=dto.name,
            email=dto.email,
            phone=dto.phone,
            address=dto.address,
        )
        if dto.active is not None:
            customer.active = dto.active

        customer = self._persist(customer)
        logger.info("customer.created", customer_id=str(customer.pk))
        return customer

    def update(self, id: str, dto: UpdateCustomerDTO) -> Customer:
        """Apply the supplied fields to an existing customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
            CustomerEmailInUse: if the new email belongs to another customer.
        """
        customer = self.get(id)
        changes = dto.provided_fields()
        log = logger.bind(customer_id=str(id))

        new_email = changes.get("email")
        if new_email is not None and new_email != customer.email:
            existing = self._repo.get_by_email(new_email)
            if existing and existing.pk != customer.pk:
                log.warning("customer.duplicate_email")
                raise CustomerEmailInUse()

        for field, value in changes.items():
            setattr(customer, field, value)

        customer = self._persist(customer)
        log.info("customer.updated", fields=sorted(changes))
        return customer

    def delete(self, id: str) -> None:
        """Soft-delete a customer.

        Raises:
            CustomerNotFound: if the customer does not exist.
            CustomerHasActivePayments: while pending payments reference it.
        """
        customer = self.get(id)

        pending = self._payments.count_pending_for_customer(customer.pk)
        if pending:
            logger.warning(
                "customer.delete_blocked",
                customer_id=str(id),
                pending_payments=pending,
            )
            raise CustomerHasActivePayments()

        self._repo.delete(customer.pk)
        logger.info("customer.deleted", customer_id=str(id))

    def _persist(self, customer: Customer) -> Customer:
        # The unique index catches an email claimed after the look-up.
        try:
            return self._repo.save(customer)
        except IntegrityError as exc:
            logger.warning("customer.duplicate_email", race=True)
            raise CustomerEmailInUse() from exc

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet[Customer]:
        """Return live customers, optionally filtered."""
        return self._repo.list(filters)

    def get(self, id: str) -> Customer:
        """Retrieve a single customer by ID.

        Raises:
            CustomerNotFound: if the customer does not exist.
        """
        customer = self._repo.get_by_id(id)
        if not customer:
            raise CustomerNotFound(f"Customer {id} not found.")
        return customer
