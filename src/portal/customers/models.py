"""Customer model.

Business rules implemented:
- Email is unique among customers (enforced at service layer and by the
  unique index).
- Phone is stored normalized (digits plus an optional leading ``+``).
- Soft delete via ``deleted_at`` (inherited from SoftDeleteModel).
"""

from __future__ import annotations

from django.db import models

from portal.core.models import SoftDeleteModel, uuid_primary_key


class Customer(SoftDeleteModel):
    """Customer aggregate root.

    ``email`` keeps its unique index regardless of soft-delete state, so an
    address that belonged to a deleted customer cannot be reassigned.
    """

    customer_id = uuid_primary_key()
    name = models.CharField(max_length=200)
    email = models.EmailField(max_length=254, unique=True)
    phone = models.CharField(max_length=20)
    address = models.CharField(max_length=255)
    active = models.BooleanField(default=True)

    class Meta:
        db_table = "customer"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="customer_created_idx"),
            models.Index(fields=["active"], name="customer_active_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.name} <{self.email}>"
