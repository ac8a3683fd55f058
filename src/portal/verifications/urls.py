"""Verification URL configuration."""

from __future__ import annotations

from rest_framework.routers import SimpleRouter

from portal.verifications.views import VerificationViewSet

router = SimpleRouter(trailing_slash=False)
router.register("verifications", VerificationViewSet, basename="verification")

urlpatterns = router.urls
