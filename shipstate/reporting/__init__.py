"""
ShipState Reporting

Ownership gate, report schema and the single-pass report builder.
"""

from .schema import VesselReport
from .gate import OwnershipGate, check_ownership
from .builder import VesselReportBuilder, format_summary

__all__ = [
    "VesselReport",
    "OwnershipGate",
    "check_ownership",
    "VesselReportBuilder",
    "format_summary",
]
