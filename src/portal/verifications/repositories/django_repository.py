"""Django ORM implementation of the Verification repository."""

from __future__ import annotations

from portal.core.repositories.django_repository import DjangoRepository
from portal.verifications.models import Verification


class VerificationDjangoRepository(DjangoRepository[Verification]):
    model = Verification
