"""
Request conventions installed by `modulekit.modules.ConventionsModule`.

Components
----------
- `RequestSizeLimitMiddleware`:
    * Rejects POST/PUT/PATCH bodies whose `Content-Length` exceeds
      `MAX_REQUEST_BYTES` with a 413 JSON error, before any parsing.
    * A missing or unparsable `Content-Length` is let through.
- `RequestIDLogMiddleware`:
    * Accepts a safe client `X-Request-ID` or generates one, exposes it as
      `request.request_id`, binds it for `core.logging.RequestIDFilter` and echoes
      it in the response.
    * Logs one line per request to `todo_sample.request` (method, path, status,
      duration in ms).
"""

from __future__ import annotations

import logging
import re
import time
import uuid
from typing import Callable, Optional

from django.conf import settings
from django.http import HttpRequest, HttpResponse, JsonResponse

from .logging import request_id_var

logger = logging.getLogger("todo_sample.request")

_SAFE_REQUEST_ID = re.compile(r"^[A-Za-z0-9._\-]{1,200}$")

_BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


def resolve_request_id(raw: Optional[str]) -> str:
    """Return `raw` when it is a safe token, otherwise a fresh uuid4 hex."""
    if raw and _SAFE_REQUEST_ID.match(raw):
        return raw
    return uuid.uuid4().hex


def _content_length(request: HttpRequest) -> Optional[int]:
    try:
        return int(request.META["CONTENT_LENGTH"])
    except (KeyError, TypeError, ValueError):
        return None


class RequestSizeLimitMiddleware:
    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response
        self.max_bytes = int(getattr(settings, "MAX_REQUEST_BYTES", 2_000_000))

    def __call__(self, request: HttpRequest) -> HttpResponse:
        if self.max_bytes > 0 and request.method.upper() in _BODY_METHODS:
            length = _content_length(request)
            if length is not None and length > self.max_bytes:
                return JsonResponse(
                    {
                        "detail": f"Request entity too large. Max {self.max_bytes} bytes.",
                        "code": "request_too_large",
                        "max_bytes": self.max_bytes,
                    },
                    status=413,
                )
        return self.get_response(request)


class RequestIDLogMiddleware:
    def __init__(self, get_response: Callable[[HttpRequest], HttpResponse]) -> None:
        self.get_response = get_response

    def __call__(self, request: HttpRequest) -> HttpResponse:
        request_id = resolve_request_id(request.headers.get("X-Request-ID"))
        request.request_id = request_id
        token = request_id_var.set(request_id)
        try:
            started = time.perf_counter()
            response = self.get_response(request)
            duration_ms = int((time.perf_counter() - started) * 1000)

            response.headers["X-Request-ID"] = request_id
            logger.info(
                "request",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "path": request.path,
                    "status": response.status_code,
                    "duration_ms": duration_ms,
                },
            )
            return response
        finally:
            request_id_var.reset(token)
