"""
AppConfig for `modulekit`.

Ships the layouts, the theme stylesheet and the shell context processor. The
module graph itself is resolved before Django starts (during settings import),
so `ready()` only checks that the composition actually happened.
"""

from django.apps import AppConfig
from django.core.exceptions import ImproperlyConfigured


class ModulekitConfig(AppConfig):
    name = "modulekit"
    verbose_name = "Module kit"

    def ready(self) -> None:
        from django.conf import settings

        if not hasattr(settings, "APPLICATION"):
            raise ImproperlyConfigured("modulekit is installed but settings.APPLICATION was never built")
