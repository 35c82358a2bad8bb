"""The sample application: starts from the shell module, material layout."""

from modulekit import ApplicationBase

from .modules import TodoShellModule


class TodoApplication(ApplicationBase):
    title = "Todo"
    main_layout = "modulekit/layouts/material.html"

    def __init__(self, configuration, logger, services, environment_name):
        super().__init__(configuration, logger, services, environment_name)
        self.catalog.add_module(TodoShellModule)
