"""
Server-rendered page tests.

What these tests verify
-----------------------
- `/` renders inside the material layout with the shell's navigation entry.
- Posting the form creates a todo (redirect) or re-renders with a 400 on blank input.
- Toggling flips completion; unknown ids 404 and GET is not allowed.
"""

from __future__ import annotations

from django.test import TestCase

from todo.models import Todo


class IndexPageTests(TestCase):
    databases = {"default", "TodoShellModule"}

    def test_renders_layout_navigation_and_todos(self):
        Todo.objects.create(title="Existing task")
        resp = self.client.get("/")
        self.assertEqual(resp.status_code, 200)
        self.assertTemplateUsed(resp, "todo/index.html")
        self.assertTemplateUsed(resp, "modulekit/layouts/material.html")
        self.assertContains(resp, 'class="mdi mdi-list-status"')
        self.assertContains(resp, 'href="/" class="active"')
        self.assertContains(resp, "Existing task")
        self.assertContains(resp, "materialdesignicons.min.css")

    def test_create_redirects(self):
        resp = self.client.post("/", {"title": "New task"})
        self.assertRedirects(resp, "/")
        self.assertTrue(Todo.objects.filter(title="New task").exists())

    def test_blank_title_rerenders(self):
        resp = self.client.post("/", {"title": "   "})
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(Todo.objects.count(), 0)

    def test_toggle(self):
        todo = Todo.objects.create(title="Flip me")
        resp = self.client.post(f"/todos/{todo.pk}/toggle/")
        self.assertRedirects(resp, "/")
        todo.refresh_from_db()
        self.assertTrue(todo.is_done)

    def test_toggle_unknown_and_wrong_method(self):
        self.assertEqual(self.client.post("/todos/999/toggle/").status_code, 404)
        todo = Todo.objects.create(title="Stay")
        self.assertEqual(self.client.get(f"/todos/{todo.pk}/toggle/").status_code, 405)

    def test_toggle_button_and_home_link_use_icons(self):
        Todo.objects.create(title="Open one")
        Todo.objects.create(title="Done one", is_done=True)
        resp = self.client.get("/")
        self.assertContains(resp, 'class="mdi mdi-checkbox-blank-outline"')
        self.assertContains(resp, 'class="mdi mdi-checkbox-marked-outline"')
        self.assertContains(resp, '<a class="shell-home" href="/"><span class="mdi mdi-home"></span></a>')
