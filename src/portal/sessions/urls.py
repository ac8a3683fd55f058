"""Session URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from portal.sessions.views import SessionViewSet

router = SimpleRouter(trailing_slash=False)
router.register("sessions", SessionViewSet, basename="session")

urlpatterns = router.urls
