"""
The sample's shell module.

`TodoShellModule` puts the "Todo" page at "/" in the navigation, declares the
in-memory entity store holding `todo.Todo` rows, and mounts the page and API
routes. It is the only module named "TodoShellModule"; a second definition under
that name (e.g. a "Home"-labelled variant) is rejected when the graph is
resolved.
"""

from modulekit import AutoCreateOption, ModuleBase, depends_on
from modulekit.icons import MdiIcons
from modulekit.modules import ConventionsModule, MaterialDesignIconsModule, TemplatesModule


@depends_on(TemplatesModule)
@depends_on(ConventionsModule)
@depends_on(MaterialDesignIconsModule)
class TodoShellModule(ModuleBase):
    apps = ("todo",)

    def register_nav_items(self, nav_items):
        nav_items.add(("Todo", "/", MdiIcons.LIST_STATUS))

    def configure_services(self, application, services):
        services.add_entity_store(self.name, lambda store: store
            .add_types("todo.Todo")
            .with_auto_create_option(AutoCreateOption.DATABASE_AND_SCHEMA)
            .in_memory()
        )
        services.add_urls("", "todo.urls", namespace="todo")
        services.add_api_route("todos", "todo.api.TodoViewSet", basename="todo")
