import django_filters

from portal.verifications.models import Verification, VerificationStatus


class VerificationFilter(django_filters.FilterSet):
    customer_id = django_filters.UUIDFilter(field_name="customer_id")
    session_id = django_filters.UUIDFilter(field_name="session_id")
    payment_id = django_filters.UUIDFilter(field_name="payment_id")
    status = django_filters.ChoiceFilter(choices=VerificationStatus.choices)
    type = django_filters.CharFilter(field_name="type", lookup_expr="iexact")

    class Meta:
        model = Verification
        fields = ["customer_id", "session_id", "payment_id", "status", "type"]
