"""
Built-in capability modules.

Dependency layout
-----------------
    TemplatesModule
    ConventionsModule
    MaterialDesignIconsModule
    DefaultThemeModule        -> TemplatesModule, MaterialDesignIconsModule
    HttpTransportModule       -> ConventionsModule
    JsonSerializationModule   -> HttpTransportModule
    SchemaUpdateModule

Applications depend on the ones they need; the resolver pulls in the rest.
"""

from __future__ import annotations

import logging

from .base import ModuleBase, depends_on
from .stores import update_schema

logger = logging.getLogger(__name__)

MDI_STYLESHEET = "https://cdn.jsdelivr.net/npm/@mdi/font@7.4.47/css/materialdesignicons.min.css"


class TemplatesModule(ModuleBase):
    """Layouts, the shell context processor and the framework's templates."""

    apps = ("modulekit",)

    def configure_services(self, application, services):
        services.add_context_processor("django.template.context_processors.request")
        services.add_context_processor("modulekit.context_processors.shell")


class ConventionsModule(ModuleBase):
    """Request conventions: body size limit and request-id logging (see `core.middleware`)."""

    apps = ("core",)

    def configure_services(self, application, services):
        services.add_middleware(
            "core.middleware.RequestSizeLimitMiddleware",
            before="django.middleware.common.CommonMiddleware",
        )
        services.add_middleware("core.middleware.RequestIDLogMiddleware")
        services.set_default("MAX_REQUEST_BYTES", 2_000_000)


class MaterialDesignIconsModule(ModuleBase):
    """Links the Material Design Icons webfont so `MdiIcons` names render."""

    def configure_services(self, application, services):
        services.add_stylesheet(MDI_STYLESHEET)


@depends_on(TemplatesModule)
@depends_on(MaterialDesignIconsModule)
class DefaultThemeModule(ModuleBase):
    """Default look: static files plus the theme stylesheet."""

    apps = ("django.contrib.staticfiles",)

    def configure_services(self, application, services):
        services.add_stylesheet("modulekit/theme.css")


@depends_on(ConventionsModule)
class HttpTransportModule(ModuleBase):
    """
    JSON-over-HTTP surface: DRF, django-filter and drf-spectacular, mounted at
    `/api/`. Modules add viewsets with `services.add_api_route(...)`.
    """

    apps = ("rest_framework", "django_filters", "drf_spectacular")

    def configure_services(self, application, services):
        services.merge_setting(
            "REST_FRAMEWORK",
            {
                "DEFAULT_FILTER_BACKENDS": [
                    "django_filters.rest_framework.DjangoFilterBackend",
                    "rest_framework.filters.OrderingFilter",
                    "rest_framework.filters.SearchFilter",
                ],
                "DEFAULT_PAGINATION_CLASS": "rest_framework.pagination.PageNumberPagination",
                "PAGE_SIZE": 25,
                "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
            },
        )
        services.merge_setting(
            "SPECTACULAR_SETTINGS",
            {
                "TITLE": f"{application.title} API",
                "VERSION": "0.1.0",
                "OPERATION_ID_DUPLICATE_MODE": "suffix",
            },
        )
        services.add_urls("api/", "modulekit.transport.urls")


@depends_on(HttpTransportModule)
class JsonSerializationModule(ModuleBase):
    """JSON-only renderers/parsers with ISO-8601 datetimes."""

    def configure_services(self, application, services):
        services.merge_setting(
            "REST_FRAMEWORK",
            {
                "DEFAULT_RENDERER_CLASSES": ["rest_framework.renderers.JSONRenderer"],
                "DEFAULT_PARSER_CLASSES": ["rest_framework.parsers.JSONParser"],
                "DATETIME_FORMAT": "iso-8601",
                "COERCE_DECIMAL_TO_STRING": False,
                "UNICODE_JSON": True,
                "COMPACT_JSON": True,
            },
        )


class SchemaUpdateModule(ModuleBase):
    """Creates missing entity store tables once the pipeline is configured."""

    def configure_pipeline(self, application, handler):
        for store in application.services.entity_stores.values():
            created = update_schema(store)
            logger.debug("Schema update for store %s created %d table(s)", store.name, len(created))
