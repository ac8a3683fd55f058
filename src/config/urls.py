from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from django.urls import include, path

urlpatterns = [
    path("api/", include("portal.core.urls")),
    # Domain modules
    path("api/", include("portal.customers.urls")),
    path("api/", include("portal.services_catalog.urls")),
    path("api/", include("portal.products.urls")),
    path("api/", include("portal.payments.urls")),
    path("api/", include("portal.sessions.urls")),
    path("api/", include("portal.verifications.urls")),
    # OpenAPI schema & docs (public)
    path("api/schema", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
]
