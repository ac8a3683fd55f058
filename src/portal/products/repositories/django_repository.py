"""Django ORM implementation of the Product repository."""

from __future__ import annotations

from portal.core.repositories.django_repository import DjangoRepository
from portal.products.models import Product


class ProductDjangoRepository(DjangoRepository[Product]):
    model = Product
