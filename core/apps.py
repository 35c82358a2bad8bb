"""AppConfig for the `core` app.

Scope
-----
Holds shared request infrastructure installed by the conventions module:
- middleware (observability and size limits),
- logging helpers (request-id),
- the health endpoint.
"""

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Standard Django AppConfig; keep defaults lightweight."""
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core'
