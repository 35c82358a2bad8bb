"""
`/api/todos/` and `/api/nav/` tests.

What these tests verify
-----------------------
- CRUD over todos with JSON payloads; timestamps are read-only.
- Rows are written to the in-memory "TodoShellModule" store, not the default DB.
- `is_done` filtering, title search and blank-title validation.
- The navigation endpoint returns the shell's single entry.
- `/api/schema/` lists the module routes; `/api/docs/` serves Swagger UI.
"""

from __future__ import annotations

from rest_framework.test import APIClient, APITestCase

from todo.models import Todo

STORE = "TodoShellModule"


class TodoApiTests(APITestCase):
    databases = {"default", STORE}

    def setUp(self):
        self.client = APIClient()

    def test_create_and_list(self):
        resp = self.client.post("/api/todos/", {"title": "  Write tests  "}, format="json")
        self.assertEqual(resp.status_code, 201, resp.data)
        self.assertEqual(resp.data["title"], "Write tests")
        self.assertFalse(resp.data["is_done"])

        resp = self.client.get("/api/todos/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.data["count"], 1)
        self.assertEqual(resp.data["results"][0]["title"], "Write tests")

    def test_rows_live_in_the_entity_store(self):
        self.client.post("/api/todos/", {"title": "Stored"}, format="json")
        self.assertEqual(Todo.objects.using(STORE).count(), 1)
        self.assertEqual(Todo.objects.db, STORE)

    def test_update_and_delete(self):
        todo = Todo.objects.create(title="Ship it")
        resp = self.client.patch(f"/api/todos/{todo.pk}/", {"is_done": True}, format="json")
        self.assertEqual(resp.status_code, 200, resp.data)
        todo.refresh_from_db()
        self.assertTrue(todo.is_done)

        resp = self.client.delete(f"/api/todos/{todo.pk}/")
        self.assertEqual(resp.status_code, 204)
        self.assertFalse(Todo.objects.filter(pk=todo.pk).exists())

    def test_read_only_timestamps_are_ignored(self):
        resp = self.client.post(
            "/api/todos/", {"title": "Clock", "created_at": "2000-01-01T00:00:00Z"}, format="json"
        )
        self.assertEqual(resp.status_code, 201)
        self.assertFalse(resp.data["created_at"].startswith("2000"))

    def test_filter_and_search(self):
        Todo.objects.create(title="Buy milk", is_done=True)
        Todo.objects.create(title="Walk dog")
        Todo.objects.create(title="Buy bread")

        resp = self.client.get("/api/todos/", {"is_done": "true"})
        self.assertEqual([t["title"] for t in resp.data["results"]], ["Buy milk"])

        resp = self.client.get("/api/todos/", {"search": "buy"})
        self.assertEqual(sorted(t["title"] for t in resp.data["results"]), ["Buy bread", "Buy milk"])

    def test_blank_title_rejected(self):
        resp = self.client.post("/api/todos/", {"title": "   "}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertIn("title", resp.data)

    def test_non_json_payload_rejected(self):
        resp = self.client.post("/api/todos/", {"title": "form"}, format="multipart")
        self.assertEqual(resp.status_code, 415)


class NavApiTests(APITestCase):
    def test_nav_items(self):
        resp = self.client.get("/api/nav/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), [{"label": "Todo", "href": "/", "icon": "mdi-list-status"}])


class ApiDocsTests(APITestCase):
    def test_schema_lists_module_routes(self):
        resp = self.client.get("/api/schema/", {"format": "json"})
        self.assertEqual(resp.status_code, 200)
        paths = resp.json()["paths"]
        self.assertIn("/api/todos/", paths)
        self.assertIn("/api/todos/{id}/", paths)
        self.assertIn("/api/nav/", paths)

    def test_swagger_ui(self):
        resp = self.client.get("/api/docs/")
        self.assertEqual(resp.status_code, 200)
        self.assertContains(resp, "swagger-ui")
