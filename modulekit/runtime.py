"""Access to the application built during settings composition."""

from __future__ import annotations

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from .application import ApplicationBase


def get_application() -> ApplicationBase:
    """Return `settings.APPLICATION` (set by the composition root)."""
    application = getattr(settings, "APPLICATION", None)
    if not isinstance(application, ApplicationBase):
        raise ImproperlyConfigured(
            "settings.APPLICATION is not set; settings must build the application "
            "(see todo_sample.program.build_application)."
        )
    return application
