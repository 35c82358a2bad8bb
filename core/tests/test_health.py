"""Tests for the lightweight /health/ endpoint.

Contract
--------
- 200 when every database (default + entity stores) connects; the payload lists
  each store: {"app": "todo-sample", "db": "ok", "stores": {...}, "time": "..."}.
- 503 when a connectivity check raises; payload includes {"db": "down", "error": "..."}.
"""

from unittest.mock import patch

from django.test import TestCase


class HealthEndpointTests(TestCase):
    """Validate happy path and error path for /health/."""

    databases = {"default", "TodoShellModule"}

    def test_health_ok(self):
        resp = self.client.get("/health/")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data.get("db"), "ok")
        self.assertEqual(data.get("app"), "todo-sample")
        self.assertEqual(data.get("stores"), {"TodoShellModule": "ok"})
        self.assertIn("time", data)

    def test_health_db_down(self):
        # Simulate DB connectivity failure to assert 503 behavior and error key.
        with patch("django.db.connection.ensure_connection", side_effect=Exception("boom")):
            resp = self.client.get("/health/")
        self.assertEqual(resp.status_code, 503)
        data = resp.json()
        self.assertEqual(data.get("db"), "down")
        self.assertIn("boom", data.get("error", ""))
