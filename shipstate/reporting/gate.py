"""
reporting/gate.py - Ownership gate.

Nothing about a vessel is aggregated unless the observer owns it, so
unidentified objects never leak their contents into a report.
"""

from __future__ import annotations
import logging

from ..core.enums import DiscoveryLevel
from ..errors import ErrorCode

logger = logging.getLogger(__name__)


def check_ownership(vessel, required_level: DiscoveryLevel = DiscoveryLevel.OWNED) -> bool:
    """
    True when the vessel is present and known at least to required_level.

    The default demands full ownership. A False result tells the caller to
    clear any report it holds.
    """
    if vessel is None:
        logger.debug(f"[{ErrorCode.VESSEL_NOT_OWNED.name}] no vessel selected")
        return False

    level = vessel.discovery_level
    if level < required_level:
        logger.debug(
            f"[{ErrorCode.VESSEL_NOT_OWNED.name}] {vessel.display_name!r} "
            f"discovery level {getattr(level, 'name', level)}"
        )
        return False

    return True


class OwnershipGate:
    """Callable wrapper so the gate can be swapped in builders and tests."""

    required_level: DiscoveryLevel = DiscoveryLevel.OWNED

    def check(self, vessel) -> bool:
        return check_ownership(vessel, self.required_level)

    def __call__(self, vessel) -> bool:
        return self.check(vessel)
