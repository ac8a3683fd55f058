"""Product model.

Business rules implemented:
- Every product belongs to a live customer (checked at service layer).
- Soft delete via ``deleted_at`` (inherited from SoftDeleteModel).
"""

from __future__ import annotations

from django.db import models

from portal.core.models import SoftDeleteModel, uuid_primary_key


class Product(SoftDeleteModel):
    product_id = uuid_primary_key()
    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.PROTECT,
        related_name="products",
        db_column="customer_id",
    )
    name = models.CharField(max_length=150)
    description = models.CharField(max_length=255)
    active = models.BooleanField(default=True)

    class Meta:
        db_table = "product"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["customer", "active"], name="product_customer_active_idx"),
        ]

    def __str__(self) -> str:
        return self.name
