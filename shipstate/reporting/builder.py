"""
reporting/builder.py - Vessel report builder.

Runs one reporting pass: gate, single walk over the parts feeding the
resource aggregator and every visitor, then text assembly.

Report layout:
    <resource lines, sorted by name>
    <blank line>                               \
    Crew: N, Parts: N, Mass: N.NNt              > omitted for EVA
    <visitor lines, in registration order>     /
"""

from __future__ import annotations
from typing import List, Optional
import logging

from ..resources import ResourceAggregator, ResourceLibrary, format_fixed
from ..visitors import VisitorRegistry, default_visitors
from .gate import OwnershipGate
from .schema import VesselReport

logger = logging.getLogger(__name__)


def format_summary(crew_count: int, part_count: int, mass_t: float) -> str:
    """Crew, part count and total mass line."""
    return f"Crew: {crew_count}, Parts: {part_count}, Mass: {format_fixed(mass_t, 2)}t"


class VesselReportBuilder:
    """
    Builds status reports for single vessels.

    Usage:
        builder = VesselReportBuilder(library=ResourceLibrary.stock())
        report = builder.build_report(vessel)
        if report is None:
            # not owned, clear the window
            ...

    Visitors are reset at the start of every pass, so a builder can be
    reused across vessels and across failed gate checks.
    """

    def __init__(
        self,
        library: Optional[ResourceLibrary] = None,
        visitors: Optional[VisitorRegistry] = None,
        gate: Optional[OwnershipGate] = None,
    ):
        self.library = library if library is not None else ResourceLibrary.stock()
        self.visitors = visitors if visitors is not None else default_visitors()
        self.gate = gate if gate is not None else OwnershipGate()
        self._aggregator = ResourceAggregator()

    def build_report(self, vessel) -> Optional[VesselReport]:
        """
        Build the report for a vessel.

        Returns:
            VesselReport, or None when the vessel is absent or not owned.

        Raises:
            InvalidVisitorStateError: If a visitor is in an impossible state.
        """
        if not self.gate.check(vessel):
            return None

        self.visitors.reset_all()
        self._aggregator.reset()

        structural_mass = 0.0
        part_count = 0
        for part in vessel.parts:
            self._aggregator.add_part(part)
            self.visitors.visit_all(part)
            structural_mass += part.mass
            part_count += 1

        lines: List[str] = self._aggregator.lines()

        if not vessel.is_eva:
            mass = structural_mass + self._aggregator.resource_mass(self.library)
            lines.append("")
            lines.append(format_summary(vessel.crew_count, part_count, mass))
            lines.extend(self.visitors.collect_texts())

        report = VesselReport(title=vessel.display_name, lines=tuple(lines))

        logger.info(
            f"Report built for {report.title!r}: {part_count} parts, "
            f"{self._aggregator.resource_count} resources, {len(report.lines)} lines"
        )

        return report
