"""
Base Django settings for the Todo sample.

Layout
------
- Split settings: `base.py` (shared), `dev.py` (developer overrides), `prod.py` (hardened).
- `environ` is used to source configuration; a local `.env` is optional in dev.
- Module composition runs at the END of each leaf module (`dev.py`, `prod.py`):
  `APPLICATION = build_application(globals())`. Modules then contribute apps,
  middleware, context processors, entity store databases/routers and API settings
  to this namespace. Settings written here win over module contributions.

What lives here vs. in modules
------------------------------
- Here: Django core apps, the baseline middleware stack, the default database,
  templates backend, i18n, static files, logging channels.
- Modules (see `modulekit.modules`, `todo.modules`, `todo_sample.modules`):
  `core`, `modulekit`, `todo`, DRF + django-filter + drf-spectacular, the
  in-memory "TodoShellModule" database and its router.

Observability
-------------
- `core.middleware.RequestIDLogMiddleware` (added by the conventions module) logs
  one structured line per request. The composition root adds a file handler for
  `todo.vertiq.io.log` under `LOG_DIR`.
"""

from pathlib import Path
import environ

# ---------------------------------------------------------------------
# Paths & Env
# ---------------------------------------------------------------------
BASE_DIR = Path(__file__).resolve().parent.parent.parent
env = environ.Env(DEBUG=(bool, False))
env_file = BASE_DIR / ".env"
if env_file.exists():
    environ.Env.read_env(str(env_file))

# ---------------------------------------------------------------------
# Core
# ---------------------------------------------------------------------
SECRET_KEY = env("SECRET_KEY", default="dev-insecure-change-me")
DEBUG = env.bool("DEBUG", False)

ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["127.0.0.1", "localhost", "testserver"])
CSRF_TRUSTED_ORIGINS = env.list(
    "CSRF_TRUSTED_ORIGINS",
    default=["http://127.0.0.1:8000", "http://localhost:8000"],
)

# Environment name handed to the application ("Development", "Production", ...).
ENVIRONMENT_NAME = env("APP_ENVIRONMENT", default="Production")

# ---------------------------------------------------------------------
# Applications (modules append theirs during composition)
# ---------------------------------------------------------------------
INSTALLED_APPS = [
    "django.contrib.auth",
    "django.contrib.contenttypes",
]

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
]

ROOT_URLCONF = "todo_sample.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [BASE_DIR / "templates"],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [],
        },
    },
]

WSGI_APPLICATION = "todo_sample.wsgi.application"

# ---------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------
# The default database only carries Django's own tables; todos live in the
# in-memory entity store the shell module registers.
DATABASES = {
    "default": env.db(
        "DATABASE_URL",
        default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}",
    )
}

# ---------------------------------------------------------------------
# Internationalization
# ---------------------------------------------------------------------
LANGUAGE_CODE = "en-us"
TIME_ZONE = "UTC"
USE_I18N = True
USE_TZ = True

# ---------------------------------------------------------------------
# Static
# ---------------------------------------------------------------------
STATIC_URL = "static/"
DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# ---------------------------------------------------------------------
# DRF (transport/serialization modules merge their defaults under these keys)
# ---------------------------------------------------------------------
REST_FRAMEWORK = {
    # The sample has no accounts; every endpoint is public.
    "DEFAULT_AUTHENTICATION_CLASSES": [],
    "DEFAULT_PERMISSION_CLASSES": [
        "rest_framework.permissions.AllowAny",
    ],
    "UNAUTHENTICATED_USER": None,
}

SPECTACULAR_SETTINGS = {
    "DESCRIPTION": "Todo sample API (in-memory store).",
    "SERVE_INCLUDE_SCHEMA": False,
}

# --- Size/Limits ---------------------------------------------------------------
# Max body size for unsafe methods (bytes)
MAX_REQUEST_BYTES = env.int("MAX_REQUEST_BYTES", default=2_000_000)

# ---------------------------------------------------------------------
# Security defaults (safe baseline; prod hardening in prod.py)
# ---------------------------------------------------------------------
CSRF_COOKIE_SAMESITE = "Lax"
X_FRAME_OPTIONS = "DENY"

# ---------------------------------------------------------------------
# Logging (observability)
# ---------------------------------------------------------------------
LOG_DIR = Path(env("LOG_DIR", default=str(BASE_DIR / "logs")))
LOG_LEVEL = env("LOG_LEVEL", default="INFO")

# Structured console logging for request lines. The RequestIDFilter injects
# `request_id` even for logs outside HTTP contexts. The composition root adds
# the `application_file` handler on top of this.
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "request_id": {"()": "core.logging.RequestIDFilter"},
    },
    "formatters": {
        "structured": {
            "format": "level=%(levelname)s logger=%(name)s request_id=%(request_id)s "
                      "method=%(method)s path=%(path)s status=%(status)s duration_ms=%(duration_ms)s "
                      "message=%(message)s"
        },
        "simple": {
            "format": "level=%(levelname)s logger=%(name)s request_id=%(request_id)s message=%(message)s"
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "filters": ["request_id"],
            "formatter": "simple",
        },
        "request_console": {
            "class": "logging.StreamHandler",
            "filters": ["request_id"],
            "formatter": "structured",
        },
    },
    "root": {"handlers": ["console"], "level": LOG_LEVEL},
    "loggers": {
        # The middleware logs one line per request to this logger.
        "todo_sample.request": {
            "handlers": ["request_console"],
            "level": "INFO",
            "propagate": False,
        },
    },
}
