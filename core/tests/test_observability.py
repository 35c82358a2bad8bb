"""
Request conventions middleware tests.

What these tests verify
-----------------------
- Every response carries `X-Request-ID`: a client-provided safe id is echoed,
  an unsafe one is replaced by a generated uuid4 hex.
- Exactly one INFO line per request goes to the `todo_sample.request` logger,
  carrying method, path and status.
- Unsafe requests whose `Content-Length` exceeds `MAX_REQUEST_BYTES` get a 413
  JSON error before reaching the view.

Notes
-----
- Both middlewares are installed by the conventions module during composition;
  these tests run against the composed middleware stack.
"""

from __future__ import annotations

import re

from django.test import TestCase, override_settings

from core.logging import RequestIDFilter, request_id_var


class RequestIDMiddlewareTests(TestCase):
    databases = {"default", "TodoShellModule"}

    def test_generates_request_id_for_unsafe_header_and_logs_once(self):
        with self.assertLogs("todo_sample.request", level="INFO") as cap:
            resp = self.client.get("/health/", HTTP_X_REQUEST_ID="bad id with spaces")
        self.assertEqual(resp.status_code, 200)
        rid = resp.headers["X-Request-ID"]
        self.assertRegex(rid, re.compile(r"^[0-9a-f]{32}$"))
        self.assertEqual(len(cap.records), 1)
        record = cap.records[0]
        self.assertEqual(record.request_id, rid)
        self.assertEqual(record.method, "GET")
        self.assertEqual(record.path, "/health/")
        self.assertEqual(record.status, 200)

    def test_echoes_safe_client_request_id(self):
        resp = self.client.get("/health/", HTTP_X_REQUEST_ID="abc-123.XYZ")
        self.assertEqual(resp.headers["X-Request-ID"], "abc-123.XYZ")

    def test_request_id_is_reset_after_the_request(self):
        self.client.get("/health/", HTTP_X_REQUEST_ID="scoped-id")
        self.assertEqual(request_id_var.get(), "-")


class RequestSizeLimitMiddlewareTests(TestCase):
    databases = {"default", "TodoShellModule"}

    @override_settings(MAX_REQUEST_BYTES=10)
    def test_rejects_large_body_with_413(self):
        resp = self.client.post("/api/todos/", data='{"title": "far too long for the limit"}',
                                content_type="application/json")
        self.assertEqual(resp.status_code, 413)
        body = resp.json()
        self.assertEqual(body["code"], "request_too_large")
        self.assertEqual(body["max_bytes"], 10)

    @override_settings(MAX_REQUEST_BYTES=10)
    def test_get_requests_are_not_limited(self):
        resp = self.client.get("/health/")
        self.assertEqual(resp.status_code, 200)


class RequestIDFilterTests(TestCase):
    def test_fills_missing_fields_outside_requests(self):
        import logging

        record = logging.LogRecord("x", logging.INFO, __file__, 1, "msg", None, None)
        self.assertTrue(RequestIDFilter().filter(record))
        self.assertEqual(record.request_id, "-")
        self.assertEqual(record.status, "-")
