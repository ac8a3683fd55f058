import django_filters

from portal.payments.models import Payment, PaymentStatus


class PaymentFilter(django_filters.FilterSet):
    customer_id = django_filters.UUIDFilter(field_name="customer_id")
    product_id = django_filters.UUIDFilter(field_name="product_id")
    status = django_filters.ChoiceFilter(choices=PaymentStatus.choices)
    currency = django_filters.CharFilter(field_name="currency", lookup_expr="iexact")
    method = django_filters.CharFilter(field_name="method", lookup_expr="iexact")
    created_after = django_filters.DateTimeFilter(
        field_name="created_at", lookup_expr="gte"
    )
    created_before = django_filters.DateTimeFilter(
        field_name="created_at", lookup_expr="lte"
    )

    class Meta:
        model = Payment
        fields = ["customer_id", "product_id", "status", "currency", "method"]
