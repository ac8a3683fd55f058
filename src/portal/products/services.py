"""Product service layer.

Business rules enforced here:
- ``customer_id`` must reference a live customer, on create and whenever
  an update changes it.
- Delete is a soft delete via the repository.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Optional

import structlog

from portal.core.exceptions import ReferenceNotFound
from portal.products.exceptions import ProductNotFound
from portal.products.models import Product

if TYPE_CHECKING:
    from django.db.models import QuerySet

    from portal.core.repositories.interfaces import IRepository
    from portal.products.dtos import CreateProductDTO, UpdateProductDTO

logger = structlog.get_logger(__name__)


class ProductService:
    """Application service for Product use-cases."""

    def __init__(self, repository: IRepository, customers: IRepository) -> None:
        self._repo = repository
        self._customers = customers

    def _check_customer(self, customer_id: Any) -> None:
        if not self._customers.exists(customer_id):
            raise ReferenceNotFound("customer_id")

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def create(self, dto: CreateProductDTO) -> Product:
        """Create a product for an existing customer.

        Raises:
            ReferenceNotFound: if ``customer_id`` does not exist.
        """
        self._check_customer(dto.customer_id)

        product = Product(
            customer_id=dto.customer_id,
            name=dto.name,
            description=dto.description,
        )
        if dto.active is not None:
            product.active = dto.active

        product = self._repo.save(product)
        logger.info(
            "product.created",
            product_id=str(product.pk),
            customer_id=str(product.customer_id),
        )
        return product

    def update(self, id: str, dto: UpdateProductDTO) -> Product:
        """Apply the supplied fields to an existing product.

        Raises:
            ProductNotFound: if the product does not exist.
            ReferenceNotFound: if a new ``customer_id`` does not exist.
        """
        product = self.get(id)
        changes = dto.provided_fields()
        if "customer_id" in changes:
            self._check_customer(changes["customer_id"])

        for field, value in changes.items():
            setattr(product, field, value)

        product = self._repo.save(product)
        logger.info("product.updated", product_id=str(id), fields=sorted(changes))
        return product

    def delete(self, id: str) -> None:
        product = self.get(id)
        self._repo.delete(product.pk)
        logger.info("product.deleted", product_id=str(id))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list(self, filters: Optional[Dict[str, Any]] = None) -> QuerySet[Product]:
        return self._repo.list(filters)

    def get(self, id: str) -> Product:
        product = self._repo.get_by_id(id)
        if not product:
            raise ProductNotFound(f"Product {id} not found.")
        return product
