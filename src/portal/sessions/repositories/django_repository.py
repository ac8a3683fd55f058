"""Django ORM implementation of the Session repository."""

from __future__ import annotations

from portal.core.repositories.django_repository import DjangoRepository
from portal.sessions.models import Session


class SessionDjangoRepository(DjangoRepository[Session]):
    model = Session
