"""
The sample's only entity.

`Todo` rows live in the in-memory entity store registered by `TodoShellModule`
(database alias "TodoShellModule"); `modulekit.stores.EntityStoreRouter` sends
every query there. Nothing survives a process restart.
"""

from django.db import models


class Todo(models.Model):
    title = models.CharField(max_length=200)
    is_done = models.BooleanField(default=False)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ("created_at", "id")

    def __str__(self) -> str:
        return f"[{'x' if self.is_done else ' '}] {self.title}"

    def toggle(self) -> None:
        self.is_done = not self.is_done
        self.save(update_fields=["is_done", "updated_at"])
