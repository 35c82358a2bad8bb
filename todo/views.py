"""
Server-rendered pages, laid out by the application's main layout.

- `index` (GET `/`): the todo list plus an add form.
- `index` (POST `/`): create a todo; redirects back (PRG) or re-renders with errors.
- `toggle` (POST `/todos/<pk>/toggle/`): flip completion.
"""

import logging

from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_http_methods, require_POST

from modulekit.icons import MdiIcons

from .forms import TodoForm
from .models import Todo

logger = logging.getLogger(__name__)

TOGGLE_ICONS = {"done": MdiIcons.CHECKBOX_MARKED, "open": MdiIcons.CHECKBOX_BLANK}


@require_http_methods(["GET", "POST"])
def index(request):
    form = TodoForm(request.POST if request.method == "POST" else None)
    if request.method == "POST" and form.is_valid():
        todo = form.save()
        logger.info("Created todo %s", todo.pk)
        return redirect("todo:index")
    status = 400 if request.method == "POST" else 200
    context = {"form": form, "todos": Todo.objects.all(), "icons": TOGGLE_ICONS}
    return render(request, "todo/index.html", context, status=status)


@require_POST
def toggle(request, pk: int):
    todo = get_object_or_404(Todo, pk=pk)
    todo.toggle()
    return redirect("todo:index")
