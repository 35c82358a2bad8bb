"""
Project URL configuration.

Surfaces
--------
- `/health/` — readiness probe (default database + entity stores).
- everything else is mounted by active modules (see `ServiceCollection.add_urls`):
  `/` and `/todos/...` from the shell module, `/api/...` from the HTTP transport.
"""

from __future__ import annotations

from django.urls import path

from core.views import health
from modulekit.runtime import get_application

urlpatterns = [
    path("health/", health, name="health"),
    *get_application().urlpatterns(),
]
