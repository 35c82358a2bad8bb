"""
Request-scoped log correlation.

- `request_id_var` holds the id of the request being served (set by
  `core.middleware.RequestIDLogMiddleware`, "-" outside requests).
- `RequestIDFilter` copies it onto every record so `%(request_id)s` in the
  formatters configured in `todo_sample.settings.base.LOGGING` always resolves,
  including during startup and management commands.
- `REQUEST_FIELDS` are the keys the request logger formats; the filter fills any
  the caller did not pass with "-".
"""

from __future__ import annotations

import logging
from contextvars import ContextVar

request_id_var: ContextVar[str] = ContextVar("request_id", default="-")

REQUEST_FIELDS = ("method", "path", "status", "duration_ms")


class RequestIDFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = request_id_var.get()
        for field in REQUEST_FIELDS:
            if not hasattr(record, field):
                setattr(record, field, "-")
        return True
