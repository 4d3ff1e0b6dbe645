"""
ui/launcher.py - Application launcher buttons.

The host's launcher bar takes one toggle button per add-on. The reference
ApplicationLauncher below keeps buttons in memory so headless drivers and
tests can click them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional
import logging

logger = logging.getLogger("ui.launcher")


class LauncherScene(str, Enum):
    """Scenes in which a launcher button is shown."""
    TRACKING_STATION = "tracking_station"
    FLIGHT = "flight"
    MAP_VIEW = "map_view"


@dataclass(eq=False)
class LauncherButton:
    """Two-state launcher button."""

    on_true: Callable[[], None]
    on_false: Callable[[], None]
    scenes: List[LauncherScene] = field(default_factory=list)
    icon: Optional[str] = None
    pressed: bool = False

    def click(self) -> None:
        """Flip the button and fire the matching callback."""
        self.pressed = not self.pressed
        if self.pressed:
            self.on_true()
        else:
            self.on_false()


class ApplicationLauncher:
    """In-memory launcher bar."""

    def __init__(self):
        self._buttons: List[LauncherButton] = []

    def add_application(
        self,
        on_true: Callable[[], None],
        on_false: Callable[[], None],
        scenes: List[LauncherScene],
        icon: Optional[str] = None,
    ) -> LauncherButton:
        button = LauncherButton(on_true=on_true, on_false=on_false, scenes=list(scenes), icon=icon)
        self._buttons.append(button)
        logger.debug(f"Added launcher button for {[s.value for s in scenes]}")
        return button

    def remove_application(self, button: LauncherButton) -> None:
        if button in self._buttons:
            self._buttons.remove(button)
            logger.debug("Removed launcher button")

    @property
    def buttons(self) -> List[LauncherButton]:
        return list(self._buttons)
