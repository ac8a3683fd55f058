"""Payment model.

``amount`` is a fixed-point ``DECIMAL(12, 2)``; it enters and leaves the
API as a string so no float conversion ever touches it.
"""

from __future__ import annotations

from django.db import models

from portal.core.models import SoftDeleteModel, uuid_primary_key


class PaymentStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    PAID = "paid", "Paid"
    FAILED = "failed", "Failed"
    REFUNDED = "refunded", "Refunded"


class Payment(SoftDeleteModel):
    payment_id = uuid_primary_key()
    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.PROTECT,
        related_name="payments",
        db_column="customer_id",
    )
    product = models.ForeignKey(
        "products.Product",
        on_delete=models.PROTECT,
        related_name="payments",
        db_column="product_id",
    )
    amount = models.DecimalField(max_digits=12, decimal_places=2)
    currency = models.CharField(max_length=3)
    method = models.CharField(max_length=50)
    status = models.CharField(
        max_length=10,
        choices=PaymentStatus.choices,
        default=PaymentStatus.PENDING,
    )
    external_ref = models.CharField(max_length=100, null=True, blank=True)
    paid_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "payment"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["customer", "status"], name="payment_customer_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Payment {self.pk} ({self.amount} {self.currency}, {self.status})"
