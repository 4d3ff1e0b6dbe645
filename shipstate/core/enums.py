"""
ShipState Core Enumerations

Enumeration types shared across the report pipeline.
"""

from enum import Enum, IntEnum


class DiscoveryLevel(IntEnum):
    """
    How much the observer knows about a vessel.

    Ordered: a higher level always includes what the lower levels reveal.
    Only OWNED vessels may be reported on.
    """
    NONE = 0
    PRESENCE = 1
    CONFIGURATION = 2
    NAME = 4
    STATE_VECTORS = 8
    APPEARANCE = 16
    OWNED = 29


class CommandStatus(str, Enum):
    """
    Command capability found while scanning a vessel's parts.
    """
    NONE = "none"  # No command module of any kind
    SEAT = "seat"  # External command seat only
    POD = "pod"    # Crewed or uncrewed command module
