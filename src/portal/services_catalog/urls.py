"""Service catalog URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from portal.services_catalog.views import ServiceViewSet

router = SimpleRouter(trailing_slash=False)
router.register("services", ServiceViewSet, basename="service")

urlpatterns = router.urls
