"""URL patterns contributed by active modules (`ServiceCollection.add_urls`)."""

from __future__ import annotations

from django.urls import include, path


def build_urlpatterns(application) -> list:
    patterns = []
    for mount in application.services.url_mounts:
        target = (mount.urlconf, mount.namespace) if mount.namespace else mount.urlconf
        patterns.append(path(mount.route, include(target, namespace=mount.namespace)))
    return patterns
