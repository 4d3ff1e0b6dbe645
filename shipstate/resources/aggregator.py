"""
ShipState Resource Aggregator

Merges per-part resource entries into per-name totals and computes the
resource share of vessel mass.

Totals exist for one reporting pass only; nothing is cached across passes.
"""

from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List
import logging

from .library import ResourceLibrary

logger = logging.getLogger(__name__)


# Amounts at or above this magnitude are shown without decimals
PRECISION_THRESHOLD = 100


def format_fixed(value: float, places: int) -> str:
    """
    Fixed-point text with halfway values rounded away from zero.

    Rounds the exact binary value, so 0.125 gives "0.13" while 1.005
    (stored as 1.00499...) gives "1.00".
    """
    exponent = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP))


def format_amount(value: float) -> str:
    """
    Format a resource amount for display.

    Two decimals below the threshold, none at or above it. No thousands
    separators.
    """
    if abs(value) < PRECISION_THRESHOLD:
        return format_fixed(value, 2)
    return format_fixed(value, 0)


@dataclass
class ResourceTotal:
    """Summed amounts of one resource across all parts."""
    name: str
    current: float = 0.0
    max_amount: float = 0.0

    def mass(self, library: ResourceLibrary) -> float:
        """Mass of the current amount in metric tons."""
        return library.density(self.name) * self.current

    def to_line(self) -> str:
        return f"{self.name}: {format_amount(self.current)} / {format_amount(self.max_amount)}"

    def __str__(self) -> str:
        return self.to_line()


class ResourceAggregator:
    """
    Accumulates resource totals over the parts of one vessel.

    Usage:
        aggregator = ResourceAggregator()
        for part in vessel.parts:
            aggregator.add_part(part)
        totals = aggregator.totals()
        mass_t = aggregator.resource_mass(library)

    Or in one call:
        totals = ResourceAggregator().aggregate(vessel.parts)
    """

    def __init__(self):
        self._totals: Dict[str, ResourceTotal] = {}

    def reset(self) -> None:
        """Drop all accumulated totals."""
        self._totals.clear()

    def add_part(self, part) -> None:
        """Add every resource entry carried by the part."""
        for entry in part.resources:
            total = self._totals.get(entry.resource_name)
            if total is None:
                total = ResourceTotal(name=entry.resource_name)
                self._totals[entry.resource_name] = total
            total.current += entry.amount
            total.max_amount += entry.max_amount

    def totals(self) -> List[ResourceTotal]:
        """Totals ordered by resource name (ordinal comparison)."""
        return [self._totals[name] for name in sorted(self._totals)]

    def aggregate(self, parts: Iterable) -> List[ResourceTotal]:
        """Reset, add every part, and return the sorted totals."""
        self.reset()
        for part in parts:
            self.add_part(part)
        return self.totals()

    def resource_mass(self, library: ResourceLibrary) -> float:
        """Total resource mass in metric tons; unknown resources weigh nothing."""
        mass = sum(total.mass(library) for total in self._totals.values())
        logger.debug(f"Resource mass: {mass:.3f} t over {len(self._totals)} resources")
        return mass

    def lines(self) -> List[str]:
        """Display lines for the sorted totals."""
        return [total.to_line() for total in self.totals()]

    @property
    def resource_count(self) -> int:
        return len(self._totals)
