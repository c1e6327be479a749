from drf_spectacular.views import SpectacularAPIView

from django.urls import include, path

urlpatterns = [
    # Domain modules (versioned API)
    path("api/v1/", include("modules.customers.urls")),
    path("api/v1/", include("modules.products.urls")),
    path("api/v1/", include("modules.orders.urls")),
    # OpenAPI schema (public)
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
]
