"""Product API views."""

from __future__ import annotations

from portal.core.views import EntityViewSet
from portal.customers.repositories.django_repository import CustomerDjangoRepository
from portal.products.dtos import CreateProductDTO, ProductOutputDTO, UpdateProductDTO
from portal.products.filters import ProductFilter
from portal.products.repositories.django_repository import ProductDjangoRepository
from portal.products.services import ProductService


class ProductViewSet(EntityViewSet):
    entity_name = "product"
    not_found_message = "Product no encontrado"
    create_dto = CreateProductDTO
    update_dto = UpdateProductDTO
    output_dto = ProductOutputDTO

    filterset_class = ProductFilter
    ordering_fields = ["created_at", "updated_at", "name"]

    def build_service(self) -> ProductService:
        return ProductService(
            repository=ProductDjangoRepository(),
            customers=CustomerDjangoRepository(),
        )
