"""Template context for layouts rendered inside the application shell."""

from __future__ import annotations

from django.templatetags.static import static

from .icons import DiagnosticIcon, NavigationIcon
from .runtime import get_application


def _stylesheet_url(entry: str) -> str:
    if entry.startswith(("http://", "https://", "/")):
        return entry
    return static(entry)


def shell(request):
    """
    Expose the active application to templates as `shell`:
    `main_layout`, `title`, `nav_items`, `stylesheets` and resolved icons.
    """
    application = get_application()
    return {
        "shell": {
            "title": application.title,
            "environment": application.environment_name,
            "main_layout": application.main_layout,
            "nav_items": list(application.nav_items),
            "stylesheets": [_stylesheet_url(entry) for entry in application.services.stylesheets],
            "icons": {
                slot.name: application.icons.resolve(slot)
                for slot in (DiagnosticIcon, NavigationIcon)
            },
        }
    }
