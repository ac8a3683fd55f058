"""Identity verification attempt tied to a customer, session and payment."""

from __future__ import annotations

from django.db import models

from portal.core.models import SoftDeleteModel, uuid_primary_key


class VerificationStatus(models.TextChoices):
    PENDING = "pending", "Pending"
    APPROVED = "approved", "Approved"
    REJECTED = "rejected", "Rejected"
    EXPIRED = "expired", "Expired"


class Verification(SoftDeleteModel):
    verification_id = uuid_primary_key()
    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.PROTECT,
        related_name="verifications",
        db_column="customer_id",
    )
    session = models.ForeignKey(
        "sessions.Session",
        on_delete=models.PROTECT,
        related_name="verifications",
        db_column="session_id",
    )
    payment = models.ForeignKey(
        "payments.Payment",
        on_delete=models.PROTECT,
        related_name="verifications",
        db_column="payment_id",
    )
    type = models.CharField(max_length=30)
    status = models.CharField(
        max_length=10,
        choices=VerificationStatus.choices,
        default=VerificationStatus.PENDING,
    )
    attempts = models.PositiveIntegerField(default=0)
    expires_at = models.DateTimeField()
    verified_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "verification"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["customer", "status"], name="verif_customer_status_idx"),
        ]

    def __str__(self) -> str:
        return f"Verification {self.pk} ({self.type}, {self.status})"
