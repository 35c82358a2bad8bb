"""AppConfig for the `todo` app (the sample's shell: pages, API and the `Todo` model)."""

from django.apps import AppConfig


class TodoConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "todo"
