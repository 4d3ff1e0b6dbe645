"""
ShipState Test Configuration and Fixtures

Shared vessels, parts and resource libraries for report tests.
"""

import pytest

from shipstate.core import DiscoveryLevel, ModuleRef, Part, ResourceEntry, Vessel
from shipstate.resources import ResourceLibrary


def make_part(mass=0.0, resources=(), modules=()):
    """
    Build a part from compact arguments.

    Usage:
        make_part(1.0, [("LiquidFuel", 50, 100)], ["ModuleCommand"])
    """
    return Part(
        mass=mass,
        resources=[ResourceEntry(name, amount, max_amount) for name, amount, max_amount in resources],
        modules=[ModuleRef(name) for name in modules],
    )


@pytest.fixture
def library():
    """Library with the LiquidFuel and Oxidizer densities only."""
    return ResourceLibrary.from_mapping({"LiquidFuel": 0.005, "Oxidizer": 0.005})


@pytest.fixture
def two_part_vessel():
    """Command pod with a fuel tank beneath it, one crew."""
    return Vessel(
        name="Kerbal X",
        discovery_level=DiscoveryLevel.OWNED,
        parts=[
            make_part(1.0, [("LiquidFuel", 50, 100)], ["ModuleCommand"]),
            make_part(0.5, [("LiquidFuel", 20, 20)]),
        ],
        crew_count=1,
        is_eva=False,
    )


@pytest.fixture
def eva_kerbal():
    """Crew member on foot carrying monopropellant and a seat-like module."""
    return Vessel(
        name="Jebediah Kerman",
        discovery_level=DiscoveryLevel.OWNED,
        parts=[
            make_part(0.09, [("MonoPropellant", 5, 5)], ["KerbalEVA", "KerbalSeat"]),
        ],
        crew_count=1,
        is_eva=True,
    )
