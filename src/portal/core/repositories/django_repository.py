"""Django ORM base implementation of ``IRepository``.

Concrete repositories set ``model`` and add their own look-ups.  The
database alias is injected through the constructor, so the connection a
repository talks to is an explicit dependency rather than module state.

Error handling follows the Null Object pattern: methods return ``None``
instead of raising HTTP-level exceptions; the Service Layer decides
how to translate a missing entity into an API response.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, TypeVar

import structlog
from django.core.exceptions import ValidationError
from django.db import DEFAULT_DB_ALIAS, transaction

from portal.core.models import SoftDeleteModel, SoftDeleteQuerySet
from portal.core.repositories.interfaces import IRepository

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=SoftDeleteModel)


class DjangoRepository(IRepository[M]):
    """Soft-delete aware repository over one model."""

    model: type[M]

    def __init__(self, using: str = DEFAULT_DB_ALIAS) -> None:
        self._using = using

    @property
    def _label(self) -> str:
        return self.model._meta.model_name

    def _alive(self) -> SoftDeleteQuerySet:
        return self.model.objects.using(self._using).alive()

    def get_by_id(self, id: Any) -> Optional[M]:
        """Retrieve a live entity by primary key.

        Returns ``None`` for non-existent or invalid IDs (e.g. malformed UUID).
        """
        try:
            return self._alive().filter(pk=id).first()
        except (ValueError, ValidationError):
            return None

    def exists(self, id: Any) -> bool:
        try:
            return self._alive().filter(pk=id).exists()
        except (ValueError, ValidationError):
            return False

    def list(self, filters: Optional[Dict[str, Any]] = None) -> SoftDeleteQuerySet:
        """List live entities with optional Django ORM look-ups.

        Examples of valid filters::

            {"status": "pending"}
            {"customer_id": "583e2f58-e0b6-4fd2-adb1-c6b948fe32ad"}
        """
        queryset = self._alive()
        if filters:
            queryset = queryset.filter(**filters)
        return queryset

    def save(self, entity: M) -> M:
        """Persist (create or update) an entity."""
        is_new = entity._state.adding
        with transaction.atomic(using=self._using):
            entity.save(using=self._using)
        logger.info(
            f"{self._label}.saved",
            entity_id=str(entity.pk),
            is_new=is_new,
        )
        return entity

    def delete(self, id: Any) -> bool:
        """Soft-delete an entity by ID.

        Returns ``True`` if the entity was found and soft-deleted,
        ``False`` if no live entity exists with the given ID.
        """
        with transaction.atomic(using=self._using):
            entity = self.get_by_id(id)
            if not entity:
                return False
            entity.delete(using=self._using)
        logger.info(f"{self._label}.soft_deleted", entity_id=str(id))
        return True
