"""Payment URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from portal.payments.views import PaymentViewSet

router = SimpleRouter(trailing_slash=False)
router.register("payments", PaymentViewSet, basename="payment")

urlpatterns = router.urls
