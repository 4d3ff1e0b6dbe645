"""
Vessel Data Structures

Read-only view of the host's vessel data consumed by the report pipeline:
- ModuleRef: Named capability attached to a part
- ResourceEntry: Resource amount carried by a single part
- Part: One component of a vessel
- Vessel: The aggregate being reported on
- MapTarget: What the host's map selection points at

Hosts may pass any object exposing the same attributes; these dataclasses
are the reference shapes used by tests and headless drivers.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .enums import DiscoveryLevel


@dataclass(frozen=True)
class ModuleRef:
    """Named module attached to a part (e.g. ModuleCommand)."""
    name: str


@dataclass(frozen=True)
class ResourceEntry:
    """Resource stored in one part."""
    resource_name: str
    amount: float = 0.0
    max_amount: float = 0.0


@dataclass
class Part:
    """
    Single vessel part.

    Mass is the structural (dry) mass in metric tons (t).
    """
    mass: float = 0.0
    resources: List[ResourceEntry] = field(default_factory=list)
    modules: List[ModuleRef] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Part":
        """
        Build a part from a plain dictionary.

        Accepts resources as dicts or (name, amount, max_amount) tuples and
        modules as dicts or bare names.
        """
        resources = []
        for r in data.get("resources", []):
            if isinstance(r, dict):
                resources.append(ResourceEntry(
                    resource_name=r["resource_name"],
                    amount=float(r.get("amount", 0.0)),
                    max_amount=float(r.get("max_amount", 0.0)),
                ))
            else:
                name, amount, max_amount = r
                resources.append(ResourceEntry(name, float(amount), float(max_amount)))

        modules = [
            ModuleRef(m["name"]) if isinstance(m, dict) else ModuleRef(m)
            for m in data.get("modules", [])
        ]

        return cls(
            mass=float(data.get("mass", 0.0)),
            resources=resources,
            modules=modules,
        )


@dataclass
class Vessel:
    """
    Vessel as supplied by the host.

    is_eva marks a single crew member on foot outside any craft.
    """
    name: str = ""
    discovery_level: DiscoveryLevel = DiscoveryLevel.OWNED
    parts: List[Part] = field(default_factory=list)
    crew_count: int = 0
    is_eva: bool = False

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def part_count(self) -> int:
        return len(self.parts)


@dataclass
class MapTarget:
    """Map object selected by the user; may not be a vessel at all."""
    vessel: Optional[Vessel] = None
