"""
ui/window.py - Report window and render sink.

The window owns its rectangle (position survives sessions, size re-fits
to each new report) and draws the current report through a renderer
supplied by the host.
"""

from __future__ import annotations
from dataclasses import dataclass, replace
from typing import Optional, Protocol, TextIO
import logging

from ..reporting import VesselReport

logger = logging.getLogger("ui.window")


REPORT_WINDOW_ID = 1


@dataclass(frozen=True)
class WindowRect:
    """Screen rectangle in pixels. Zero size means fit to content."""
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0

    def shrink_to_fit(self) -> "WindowRect":
        """Same position, zero size."""
        return replace(self, width=0.0, height=0.0)


class Renderer(Protocol):
    """Host drawing surface for a titled, draggable text panel."""

    def window(
        self,
        window_id: int,
        rect: WindowRect,
        title: str,
        body: str,
        word_wrap: bool = False,
    ) -> WindowRect:
        """Draw the panel and return its rectangle after any dragging."""
        ...


class ReportWindow:
    """
    Draggable window showing the current report.

    The report is replaced as a whole; draw() never sees a partial one.
    """

    def __init__(self, rect: Optional[WindowRect] = None, visible: bool = True):
        self.rect = rect if rect is not None else WindowRect()
        self.visible = visible
        self._report: Optional[VesselReport] = None

    @property
    def report(self) -> Optional[VesselReport]:
        return self._report

    @property
    def title(self) -> Optional[str]:
        return self._report.title if self._report is not None else None

    @property
    def body(self) -> Optional[str]:
        return self._report.body if self._report is not None else None

    def show_report(self, report: Optional[VesselReport]) -> None:
        """Swap in a new report; None clears the window."""
        self._report = report

    def fit_to_content(self) -> None:
        self.rect = self.rect.shrink_to_fit()

    def draw(self, renderer: Renderer) -> bool:
        """
        Draw the window if it is visible and has a report.

        Returns:
            True if anything was drawn
        """
        report = self._report
        if not self.visible or report is None:
            return False

        self.rect = renderer.window(
            REPORT_WINDOW_ID,
            self.rect,
            report.title,
            report.body,
            word_wrap=False,
        )
        return True


class PlainTextRenderer:
    """
    Headless renderer writing each drawn panel to a text stream.

    Lines are never wrapped; the panel is as wide as its longest line.
    """

    def __init__(self, stream: TextIO):
        self.stream = stream

    def window(
        self,
        window_id: int,
        rect: WindowRect,
        title: str,
        body: str,
        word_wrap: bool = False,
    ) -> WindowRect:
        lines = body.split("\n")
        width = max([len(title)] + [len(line) for line in lines])

        self.stream.write(f"+-{'-' * width}-+\n")
        self.stream.write(f"| {title.ljust(width)} |\n")
        self.stream.write(f"+-{'-' * width}-+\n")
        for line in lines:
            self.stream.write(f"| {line.ljust(width)} |\n")
        self.stream.write(f"+-{'-' * width}-+\n")

        logger.debug(f"Rendered window {window_id} at ({rect.x:.0f}, {rect.y:.0f})")
        return replace(rect, width=float(width + 4), height=float(len(lines) + 4))
