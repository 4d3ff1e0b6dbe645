"""
Resource Definition Library

Density lookup for resource mass calculation.

All densities in metric tons per unit (t/unit).
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Iterator, Mapping, Optional
import logging

from ..errors import ErrorCode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ResourceDefinition:
    """Definition of a storable resource."""
    name: str
    density: float = 0.0  # t/unit


# Stock resource densities (t/unit)
STOCK_RESOURCES: Dict[str, float] = {
    "Ablator": 0.001,
    "ElectricCharge": 0.0,
    "IntakeAir": 0.005,
    "LiquidFuel": 0.005,
    "MonoPropellant": 0.004,
    "Ore": 0.01,
    "Oxidizer": 0.005,
    "SolidFuel": 0.0075,
    "XenonGas": 0.0001,
}


class ResourceLibrary:
    """
    Keyed table of resource definitions.

    Unknown names are not an error: they have no definition and a
    density of zero.
    """

    def __init__(self, definitions: Optional[Mapping[str, ResourceDefinition]] = None):
        self._definitions: Dict[str, ResourceDefinition] = dict(definitions or {})

    @classmethod
    def from_mapping(cls, densities: Mapping[str, float]) -> "ResourceLibrary":
        """Build a library from a plain {name: density} mapping."""
        return cls({
            name: ResourceDefinition(name=name, density=float(density))
            for name, density in densities.items()
        })

    @classmethod
    def stock(cls) -> "ResourceLibrary":
        """Library preloaded with the stock resource densities."""
        return cls.from_mapping(STOCK_RESOURCES)

    def add(self, definition: ResourceDefinition) -> None:
        self._definitions[definition.name] = definition

    def get_definition(self, name: str) -> Optional[ResourceDefinition]:
        return self._definitions.get(name)

    def density(self, name: str) -> float:
        definition = self._definitions.get(name)
        if definition is None:
            logger.debug(f"[{ErrorCode.UNKNOWN_RESOURCE.name}] no definition for {name}, density 0")
            return 0.0
        return definition.density

    def __contains__(self, name: object) -> bool:
        return name in self._definitions

    def __iter__(self) -> Iterator[ResourceDefinition]:
        return iter(self._definitions.values())

    def __len__(self) -> int:
        return len(self._definitions)
