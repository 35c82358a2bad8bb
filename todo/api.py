"""
`/api/todos/` — CRUD over the in-memory store.

Registered by `TodoShellModule` through `services.add_api_route`, mounted by
the HTTP transport module. Filters: `?is_done=true|false`, `?search=<title>`,
`?ordering=created_at|-created_at|title`.
"""

from rest_framework import viewsets
from rest_framework.permissions import AllowAny

from drf_spectacular.utils import extend_schema, extend_schema_view

from .models import Todo
from .serializers import TodoSerializer


@extend_schema_view(
    list=extend_schema(summary="List todos"),
    create=extend_schema(summary="Create a todo"),
    retrieve=extend_schema(summary="Get a todo"),
    partial_update=extend_schema(summary="Update a todo"),
    update=extend_schema(summary="Replace a todo"),
    destroy=extend_schema(summary="Delete a todo"),
)
class TodoViewSet(viewsets.ModelViewSet):
    queryset = Todo.objects.all()
    serializer_class = TodoSerializer
    permission_classes = [AllowAny]
    filterset_fields = ["is_done"]
    search_fields = ["title"]
    ordering_fields = ["created_at", "title"]
    ordering = ["created_at", "id"]
