"""
WSGI entry point.

Builds Django's handler, then lets the composed application configure its
pipeline (schema creation for in-memory stores, startup log line) exactly once.
"""

import os

from django.conf import settings
from django.core.wsgi import get_wsgi_application

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "todo_sample.settings.dev")

handler = get_wsgi_application()
application = settings.APPLICATION.configure_pipeline(handler)
