"""
Developer settings (extends base).

Defaults
--------
- DEBUG defaults True (overridable via env).
- Environment name defaults to "Development" (shows the diagnostic icon in the
  app bar).
- SQLite file for Django's own tables; todos stay in memory regardless.

Security
--------
- Do not use these settings in production; use `prod.py` for hardened defaults.
"""

from .base import *  # noqa

from todo_sample.program import build_application

DEBUG = env.bool("DEBUG", True)
ENVIRONMENT_NAME = env("APP_ENVIRONMENT", default="Development")

# ---------------------------------------------------------------------
# Optional: verbose CSRF diagnostics in dev ONLY.
# ---------------------------------------------------------------------
LOGGING["loggers"]["django.security.csrf"] = {  # type: ignore[name-defined]
    "handlers": ["console"],
    "level": "DEBUG",
    "propagate": False,
}

# ---------------------------------------------------------------------
# Composition (must stay last: modules extend the settings above)
# ---------------------------------------------------------------------
APPLICATION = build_application(globals())
