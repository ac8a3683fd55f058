import django_filters

from portal.sessions.models import Session, SessionStatus


class SessionFilter(django_filters.FilterSet):
    customer_id = django_filters.UUIDFilter(field_name="customer_id")
    status = django_filters.ChoiceFilter(choices=SessionStatus.choices)
    started_after = django_filters.DateTimeFilter(
        field_name="started_at", lookup_expr="gte"
    )
    started_before = django_filters.DateTimeFilter(
        field_name="started_at", lookup_expr="lte"
    )

    class Meta:
        model = Session
        fields = ["customer_id", "status"]
