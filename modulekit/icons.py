"""
Icon names and slots shipped with the framework.

`MdiIcons` lists Material Design Icons webfont classes (rendered as
`<span class="mdi mdi-...">`). Slots are places in the layouts whose icon a
module may replace via `IconsCollection.register_icon`.
"""

from __future__ import annotations

from .registries import Icon, IconSlot


class MdiIcons:
    HOME = "mdi-home"
    LIST_STATUS = "mdi-list-status"
    STETHOSCOPE = "mdi-stethoscope"
    CHECKBOX_MARKED = "mdi-checkbox-marked-outline"
    CHECKBOX_BLANK = "mdi-checkbox-blank-outline"


UnknownSvgIcon = Icon(
    name="unknown",
    markup=(
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24" width="20" height="20" '
        'aria-hidden="true"><circle cx="12" cy="12" r="10" fill="none" stroke="currentColor" '
        'stroke-width="2"/><text x="12" y="16" text-anchor="middle" font-size="12" '
        'fill="currentColor">?</text></svg>'
    ),
)

DiagnosticIcon = IconSlot(name="diagnostic", default=Icon(name=MdiIcons.STETHOSCOPE))

NavigationIcon = IconSlot(name="navigation", default=Icon(name=MdiIcons.HOME))
