"""
Composition root.

`build_application(namespace)` is called at the end of each leaf settings module
(`dev.py`, `prod.py`) with that module's `globals()`:

1. configuration comes from the settings' `environ.Env` (`env`),
2. a logger bound to the `todo.vertiq.io.log` destination is handed to the
   application factory,
3. `TodoApplication` adds the shell module and picks the material layout,
4. `TodoServerModule` is attached and the graph is resolved and activated,
5. services and logging are written back into the settings namespace.

`todo_sample.wsgi` then calls `APPLICATION.configure_pipeline(handler)` and the
server takes over. Any exception aborts startup.

`main()` is the `todo-sample` console script: Django's development server with
Django's own flags.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Any, MutableMapping

from modulekit import ServiceCollection, WebApplicationBuilder
from todo.application import TodoApplication

from .modules import TodoServerModule

LOG_NAME = "todo.vertiq.io.log"


def build_application(namespace: MutableMapping[str, Any]) -> TodoApplication:
    env = namespace["env"]
    environment_name = namespace.get("ENVIRONMENT_NAME", "Production")
    log_dir = Path(namespace.get("LOG_DIR") or Path(namespace["BASE_DIR"]) / "logs")
    services = ServiceCollection()

    return (
        WebApplicationBuilder.create_with_logging(
            LOG_NAME,
            lambda logger: TodoApplication(env, logger, services, environment_name),
            log_dir=log_dir,
            level=namespace.get("LOG_LEVEL", "INFO"),
            logger_name="todo_sample",
        )
        .use_server_context(namespace)
        .use_module(TodoServerModule)
        .build_application()
    )


def main(argv: list[str] | None = None) -> None:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "todo_sample.settings.dev")
    from django.core.management import execute_from_command_line

    argv = list(sys.argv if argv is None else argv)
    execute_from_command_line([argv[0], "runserver", *argv[1:]])


if __name__ == "__main__":
    main()
