import django_filters

from portal.products.models import Product


class ProductFilter(django_filters.FilterSet):
    customer_id = django_filters.UUIDFilter(field_name="customer_id")
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    active = django_filters.BooleanFilter(field_name="active")

    class Meta:
        model = Product
        fields = ["customer_id", "name", "active"]
