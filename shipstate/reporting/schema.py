"""
reporting/schema.py - Report data structures.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Tuple


@dataclass(frozen=True)
class VesselReport:
    """
    Finished status report for one vessel.

    Immutable once built; a new selection produces a new report.
    """
    title: str
    lines: Tuple[str, ...] = ()

    @property
    def body(self) -> str:
        return "\n".join(self.lines)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "lines": list(self.lines),
        }
