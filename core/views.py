"""Core utility views (unauthenticated).

Currently exposes:
- `health`: lightweight readiness endpoint that checks connectivity of the
  default database and of every entity store, and returns a minimal JSON payload.
  Intended for load balancers/k8s probes.

Security
--------
- Public by design; payload contains no sensitive data and no per-request state.
"""

from django.conf import settings
from django.db import connections
from django.http import JsonResponse
from django.utils.timezone import now


def health(request):
    """
    Lightweight health endpoint (no auth).

    Returns:
        200 JSON when every database is reachable; 503 JSON naming the first
        database that raised.
    """
    status = 200
    payload = {
        "app": "todo-sample",
        "time": now().isoformat(),
        "db": "ok",
        "stores": {},
    }
    aliases = ["default", *getattr(settings, "ENTITY_STORES", {})]
    for alias in aliases:
        try:
            connections[alias].ensure_connection()
        except Exception as exc:
            payload["db"] = "down"
            payload["error"] = f"{alias}: {exc}"
            status = 503
            break
        if alias != "default":
            payload["stores"][alias] = "ok"
    return JsonResponse(payload, status=status)
