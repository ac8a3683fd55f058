"""Django ORM implementation of the Service repository."""

from __future__ import annotations

from portal.core.repositories.django_repository import DjangoRepository
from portal.services_catalog.models import Service


class ServiceDjangoRepository(DjangoRepository[Service]):
    model = Service
