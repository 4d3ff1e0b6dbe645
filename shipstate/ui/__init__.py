"""
ShipState UI

Host seams: event dispatch, report window, launcher button and the
plugin controller tying them to the report builder.
"""

from .events import (
    HostEventType,
    HostEvent,
    EventHandler,
    EventDispatcher,
)

from .window import (
    WindowRect,
    Renderer,
    ReportWindow,
    PlainTextRenderer,
    REPORT_WINDOW_ID,
)

from .launcher import (
    LauncherScene,
    LauncherButton,
    ApplicationLauncher,
)

from .plugin import ShipStatePlugin, TOOLBAR_ICON

__all__ = [
    # Events
    "HostEventType",
    "HostEvent",
    "EventHandler",
    "EventDispatcher",
    # Window
    "WindowRect",
    "Renderer",
    "ReportWindow",
    "PlainTextRenderer",
    "REPORT_WINDOW_ID",
    # Launcher
    "LauncherScene",
    "LauncherButton",
    "ApplicationLauncher",
    # Plugin
    "ShipStatePlugin",
    "TOOLBAR_ICON",
]
