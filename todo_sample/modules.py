"""Server-side root module: the shell plus the hosting capabilities it runs on."""

from modulekit import ModuleBase, depends_on
from modulekit.icons import DiagnosticIcon, UnknownSvgIcon
from modulekit.modules import (
    DefaultThemeModule,
    HttpTransportModule,
    JsonSerializationModule,
    SchemaUpdateModule,
)
from todo.modules import TodoShellModule


@depends_on(TodoShellModule)
@depends_on(DefaultThemeModule)
@depends_on(HttpTransportModule)
@depends_on(JsonSerializationModule)
@depends_on(SchemaUpdateModule)
class TodoServerModule(ModuleBase):
    def register_icons(self, icons):
        icons.register_icon(DiagnosticIcon, UnknownSvgIcon)
