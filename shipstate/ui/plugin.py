"""
ui/plugin.py - Tracking station report plugin.

Wires the report builder to the host: listens for selection changes,
keeps the report window current, adds a toggle button to the launcher
and hands settings back on shutdown.

Lifecycle:
    settings = store.load()
    plugin = ShipStatePlugin(dispatcher)
    plugin.start(settings)
    ...                       # host emits events, calls plugin.draw()
    store.save(plugin.stop())
"""

from __future__ import annotations
from typing import Optional
import logging

from ..reporting import VesselReport, VesselReportBuilder
from ..settings import WindowSettings
from .events import EventDispatcher, HostEvent, HostEventType
from .launcher import ApplicationLauncher, LauncherButton, LauncherScene
from .window import Renderer, ReportWindow, WindowRect

logger = logging.getLogger("ui.plugin")


TOOLBAR_ICON = "shipstate/shipinfo"


class ShipStatePlugin:
    """Host-facing controller for the vessel report window."""

    def __init__(
        self,
        dispatcher: EventDispatcher,
        builder: Optional[VesselReportBuilder] = None,
    ):
        self.dispatcher = dispatcher
        self.builder = builder if builder is not None else VesselReportBuilder()
        self.window = ReportWindow()
        self._launcher: Optional[ApplicationLauncher] = None
        self._button: Optional[LauncherButton] = None
        self._started = False

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def start(self, settings: WindowSettings) -> None:
        """Apply persisted settings and subscribe to host events."""
        self.window.rect = WindowRect(x=float(settings.window_x), y=float(settings.window_y))
        self.window.visible = settings.show

        self.dispatcher.subscribe(HostEventType.SELECTION_CHANGED, self._on_selection_changed)
        self.dispatcher.subscribe(HostEventType.LAUNCHER_READY, self._on_launcher_ready)
        self._started = True

        logger.info(
            f"Started at ({settings.window_x}, {settings.window_y}), show={settings.show}"
        )

    def stop(self) -> WindowSettings:
        """
        Unsubscribe, remove the launcher button and return current settings.

        The caller persists the returned settings.
        """
        self.dispatcher.unsubscribe(HostEventType.SELECTION_CHANGED, self._on_selection_changed)
        self.dispatcher.unsubscribe(HostEventType.LAUNCHER_READY, self._on_launcher_ready)

        if self._button is not None and self._launcher is not None:
            self._launcher.remove_application(self._button)
        self._button = None
        self._launcher = None
        self._started = False

        settings = WindowSettings(
            window_x=int(self.window.rect.x),
            window_y=int(self.window.rect.y),
            show=self.window.visible,
        )
        logger.info(f"Stopped, settings {settings.to_dict()}")
        return settings

    @property
    def is_started(self) -> bool:
        return self._started

    # -------------------------------------------------------------------------
    # Commands
    # -------------------------------------------------------------------------

    def toggle_view(self) -> None:
        """Show or hide the window; the report itself is untouched."""
        self.window.visible = not self.window.visible
        logger.debug(f"Window visible={self.window.visible}")

    def update_vessel_info(self, vessel) -> Optional[VesselReport]:
        """Rebuild the report for a vessel and swap it into the window."""
        report = self.builder.build_report(vessel)
        self.window.show_report(report)
        return report

    def draw(self, renderer: Renderer) -> bool:
        """Redraw tick from the host."""
        return self.window.draw(renderer)

    @property
    def report(self) -> Optional[VesselReport]:
        return self.window.report

    @property
    def launcher_button(self) -> Optional[LauncherButton]:
        return self._button

    # -------------------------------------------------------------------------
    # Event handlers
    # -------------------------------------------------------------------------

    def _on_selection_changed(self, event: HostEvent) -> None:
        target = event.payload
        if target is None:
            return

        self.update_vessel_info(target.vessel)
        self.window.fit_to_content()

    def _on_launcher_ready(self, event: HostEvent) -> None:
        self.dispatcher.unsubscribe(HostEventType.LAUNCHER_READY, self._on_launcher_ready)

        launcher: ApplicationLauncher = event.payload
        self._launcher = launcher
        self._button = launcher.add_application(
            self.toggle_view,
            self.toggle_view,
            [LauncherScene.TRACKING_STATION],
            icon=TOOLBAR_ICON,
        )
