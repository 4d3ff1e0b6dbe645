"""
ShipState Part Visitors

Pluggable per-part inspectors that add status lines to a report.
"""

from .base import PartVisitor
from .command import (
    CommandStatusVisitor,
    COMMAND_MODULE,
    SEAT_MODULE,
)
from .registry import VisitorRegistry, default_visitors

__all__ = [
    "PartVisitor",
    "CommandStatusVisitor",
    "COMMAND_MODULE",
    "SEAT_MODULE",
    "VisitorRegistry",
    "default_visitors",
]
