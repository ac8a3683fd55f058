import django_filters

from portal.services_catalog.models import Service


class ServiceFilter(django_filters.FilterSet):
    customer_id = django_filters.UUIDFilter(field_name="customer_id")
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    active = django_filters.BooleanFilter(field_name="active")

    class Meta:
        model = Service
        fields = ["customer_id", "name", "active"]
