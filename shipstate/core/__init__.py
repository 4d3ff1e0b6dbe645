"""
ShipState Core Module

Host-facing data model shared by every other layer:
- enums: DiscoveryLevel, CommandStatus
- models: ModuleRef, ResourceEntry, Part, Vessel, MapTarget
"""

from shipstate.core.enums import (
    DiscoveryLevel,
    CommandStatus,
)

from shipstate.core.models import (
    ModuleRef,
    ResourceEntry,
    Part,
    Vessel,
    MapTarget,
)

__all__ = [
    "DiscoveryLevel",
    "CommandStatus",
    "ModuleRef",
    "ResourceEntry",
    "Part",
    "Vessel",
    "MapTarget",
]
