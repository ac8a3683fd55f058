"""Customer portal session.

``started_at`` / ``ended_at`` are server-assigned; clients only move the
``status`` field.  ``ip_address`` is stored for auditing and never
projected in responses.
"""

from __future__ import annotations

from django.db import models
from django.utils import timezone

from portal.core.models import SoftDeleteModel, uuid_primary_key


class SessionStatus(models.TextChoices):
    ACTIVE = "active", "Active"
    ENDED = "ended", "Ended"
    REVOKED = "revoked", "Revoked"


CLOSED_STATUSES = (SessionStatus.ENDED, SessionStatus.REVOKED)


class Session(SoftDeleteModel):
    session_id = uuid_primary_key()
    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.PROTECT,
        related_name="sessions",
        db_column="customer_id",
    )
    user_agent = models.CharField(max_length=255)
    ip_address = models.CharField(max_length=45, null=True, blank=True)
    status = models.CharField(
        max_length=10,
        choices=SessionStatus.choices,
        default=SessionStatus.ACTIVE,
    )
    started_at = models.DateTimeField(default=timezone.now)
    ended_at = models.DateTimeField(null=True, blank=True)

    class Meta:
        db_table = "session"
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["customer", "status"], name="session_customer_status_idx"),
        ]

    @property
    def is_closed(self) -> bool:
        return self.status in CLOSED_STATUSES

    def __str__(self) -> str:
        return f"Session {self.pk} ({self.status})"
