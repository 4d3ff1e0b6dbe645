"""
ShipState - Vessel composition status reports.

Summarizes a vessel's parts into a text report: resource totals, crew,
part count and mass, plus status lines from pluggable part visitors.
"""

from shipstate.core import (
    DiscoveryLevel,
    CommandStatus,
    ModuleRef,
    ResourceEntry,
    Part,
    Vessel,
    MapTarget,
)
from shipstate.errors import ErrorCode, ShipStateError, InvalidVisitorStateError
from shipstate.resources import (
    ResourceDefinition,
    ResourceLibrary,
    ResourceTotal,
    ResourceAggregator,
    format_amount,
)
from shipstate.visitors import PartVisitor, CommandStatusVisitor, VisitorRegistry, default_visitors
from shipstate.reporting import VesselReport, VesselReportBuilder, OwnershipGate, check_ownership
from shipstate.settings import WindowSettings, SettingsStore

__version__ = "1.0.0"

__all__ = [
    "DiscoveryLevel",
    "CommandStatus",
    "ModuleRef",
    "ResourceEntry",
    "Part",
    "Vessel",
    "MapTarget",
    "ErrorCode",
    "ShipStateError",
    "InvalidVisitorStateError",
    "ResourceDefinition",
    "ResourceLibrary",
    "ResourceTotal",
    "ResourceAggregator",
    "format_amount",
    "PartVisitor",
    "CommandStatusVisitor",
    "VisitorRegistry",
    "default_visitors",
    "VesselReport",
    "VesselReportBuilder",
    "OwnershipGate",
    "check_ownership",
    "WindowSettings",
    "SettingsStore",
    "__version__",
]
