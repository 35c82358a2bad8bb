"""
API URLconf built from the routes active modules registered.

Surfaces
--------
- `/api/<prefix>/` — one router entry per `ServiceCollection.add_api_route`.
- `/api/nav/` — navigation entries.
- `/api/schema/`, `/api/docs/` — OpenAPI schema and Swagger UI.
"""

from __future__ import annotations

from django.urls import include, path
from django.utils.module_loading import import_string
from rest_framework.routers import DefaultRouter

from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView

from modulekit.runtime import get_application

from .views import NavItemsView

router = DefaultRouter()
for route in get_application().services.api_routes:
    router.register(route.prefix, import_string(route.viewset), basename=route.basename)

urlpatterns = [
    path("schema/", SpectacularAPIView.as_view(), name="schema"),
    path("docs/", SpectacularSwaggerView.as_view(url_name="schema"), name="swagger-ui"),
    path("nav/", NavItemsView.as_view(), name="nav-items"),
    path("", include(router.urls)),
]
