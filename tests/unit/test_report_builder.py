"""
Unit tests for the ownership gate and VesselReportBuilder.
"""

import logging
from typing import List
from unittest.mock import Mock

import pytest

from shipstate.core import DiscoveryLevel, Vessel
from shipstate.errors import InvalidVisitorStateError
from shipstate.reporting import (
    OwnershipGate,
    VesselReport,
    VesselReportBuilder,
    check_ownership,
    format_summary,
)
from shipstate.resources import ResourceLibrary
from shipstate.visitors import CommandStatusVisitor, PartVisitor, VisitorRegistry
from tests.conftest import make_part


class RecordingVisitor(PartVisitor):
    """Records the calls it receives in a shared log."""

    def __init__(self, log: list, tag: str):
        self.log = log
        self.tag = tag

    def reset(self) -> None:
        self.log.append((self.tag, "reset"))

    def visit(self, part) -> None:
        self.log.append((self.tag, "visit", part.mass))

    def get_texts(self) -> List[str]:
        self.log.append((self.tag, "texts"))
        return []


class TestOwnershipGate:
    """Tests for the ownership gate."""

    def test_absent_vessel(self):
        assert check_ownership(None) is False

    @pytest.mark.parametrize("level", [
        DiscoveryLevel.NONE,
        DiscoveryLevel.PRESENCE,
        DiscoveryLevel.NAME,
        DiscoveryLevel.APPEARANCE,
    ])
    def test_not_owned(self, level):
        assert check_ownership(Vessel(name="Asteroid", discovery_level=level)) is False

    def test_owned(self):
        assert check_ownership(Vessel(name="Relay", discovery_level=DiscoveryLevel.OWNED)) is True

    def test_gate_object(self):
        gate = OwnershipGate()
        assert gate(None) is False
        assert gate.check(Vessel(discovery_level=DiscoveryLevel.OWNED)) is True

    def test_required_level_argument(self):
        vessel = Vessel(name="Contract Target", discovery_level=DiscoveryLevel.NAME)
        assert check_ownership(vessel, DiscoveryLevel.NAME) is True
        assert check_ownership(vessel, DiscoveryLevel.STATE_VECTORS) is False

    def test_gate_subclass_lowers_required_level(self):
        class NamedObjectGate(OwnershipGate):
            required_level = DiscoveryLevel.NAME

        gate = NamedObjectGate()
        assert gate.check(Vessel(discovery_level=DiscoveryLevel.NAME)) is True
        assert gate.check(Vessel(discovery_level=DiscoveryLevel.PRESENCE)) is False

    def test_builder_uses_gate_level(self, library):
        class NamedObjectGate(OwnershipGate):
            required_level = DiscoveryLevel.NAME

        vessel = Vessel(name="Tracked", discovery_level=DiscoveryLevel.APPEARANCE, parts=[make_part(1.0)])
        report = VesselReportBuilder(library=library, gate=NamedObjectGate()).build_report(vessel)

        assert report is not None
        assert report.title == "Tracked"

    def test_rejection_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="shipstate.reporting.gate"):
            check_ownership(Vessel(name="Unknown Object", discovery_level=DiscoveryLevel.PRESENCE))
        assert "VESSEL_NOT_OWNED" in caplog.text
        assert "PRESENCE" in caplog.text


class TestFormatSummary:
    """Tests for the summary line."""

    def test_format(self):
        assert format_summary(3, 42, 12.3456) == "Crew: 3, Parts: 42, Mass: 12.35t"

    def test_large_mass_keeps_decimals(self):
        assert format_summary(0, 1, 1500.0) == "Crew: 0, Parts: 1, Mass: 1500.00t"

    def test_halfway_mass_rounds_away_from_zero(self):
        assert format_summary(0, 1, 2.125) == "Crew: 0, Parts: 1, Mass: 2.13t"


class TestVesselReportBuilder:
    """Tests for report assembly."""

    def test_unowned_returns_none(self, library):
        builder = VesselReportBuilder(library=library)
        vessel = Vessel(name="Debris", discovery_level=DiscoveryLevel.NAME, parts=[make_part(1.0)])
        assert builder.build_report(vessel) is None

    def test_absent_returns_none(self, library):
        assert VesselReportBuilder(library=library).build_report(None) is None

    def test_gate_runs_before_aggregation(self, library):
        visitor = Mock(spec=PartVisitor)
        builder = VesselReportBuilder(library=library, visitors=VisitorRegistry([visitor]))
        builder.build_report(Vessel(discovery_level=DiscoveryLevel.PRESENCE, parts=[make_part()]))

        visitor.reset.assert_not_called()
        visitor.visit.assert_not_called()

    def test_report_lines(self, library, two_part_vessel):
        report = VesselReportBuilder(library=library).build_report(two_part_vessel)

        assert isinstance(report, VesselReport)
        assert report.title == "Kerbal X"
        assert report.lines == (
            "LiquidFuel: 70.00 / 120",
            "",
            "Crew: 1, Parts: 2, Mass: 1.85t",
        )

    def test_body_joined_with_newlines(self, library, two_part_vessel):
        report = VesselReportBuilder(library=library).build_report(two_part_vessel)
        assert report.body == "LiquidFuel: 70.00 / 120\n\nCrew: 1, Parts: 2, Mass: 1.85t"

    def test_no_command_pod_line(self, library):
        vessel = Vessel(name="Rover", parts=[make_part(2.0, modules=["ModuleWheelBase"])], crew_count=0)
        report = VesselReportBuilder(library=library).build_report(vessel)

        assert report.lines == ("", "Crew: 0, Parts: 1, Mass: 2.00t", "No command pod")

    def test_seat_line_last(self, library):
        vessel = Vessel(
            name="Buggy",
            parts=[make_part(0.5, [("ElectricCharge", 100, 100)], ["KerbalSeat"])],
        )
        report = VesselReportBuilder(library=library).build_report(vessel)

        assert report.lines[-1] == "Has command seat"
        assert report.lines[0] == "ElectricCharge: 100 / 100"

    def test_unknown_resource_adds_no_mass(self, library):
        vessel = Vessel(name="Miner", parts=[make_part(1.0, [("Karbonite", 50, 50)], ["ModuleCommand"])])
        report = VesselReportBuilder(library=library).build_report(vessel)

        assert "Crew: 0, Parts: 1, Mass: 1.00t" in report.lines

    def test_eva_only_resource_lines(self, library, eva_kerbal):
        report = VesselReportBuilder(library=library).build_report(eva_kerbal)

        assert report.title == "Jebediah Kerman"
        assert report.lines == ("MonoPropellant: 5.00 / 5.00",)

    def test_eva_without_resources_is_empty(self, library):
        vessel = Vessel(name="Bob Kerman", parts=[make_part(0.09)], is_eva=True)
        report = VesselReportBuilder(library=library).build_report(vessel)

        assert report is not None
        assert report.lines == ()
        assert report.body == ""

    def test_single_pass_interleaves_visitors(self, library):
        """Every visitor sees a part before the next part is visited."""
        log = []
        registry = VisitorRegistry([RecordingVisitor(log, "a"), RecordingVisitor(log, "b")])
        vessel = Vessel(parts=[make_part(1.0), make_part(2.0)])

        VesselReportBuilder(library=library, visitors=registry).build_report(vessel)

        assert log == [
            ("a", "reset"), ("b", "reset"),
            ("a", "visit", 1.0), ("b", "visit", 1.0),
            ("a", "visit", 2.0), ("b", "visit", 2.0),
            ("a", "texts"), ("b", "texts"),
        ]

    def test_eva_skips_visitor_texts(self, library, eva_kerbal):
        log = []
        registry = VisitorRegistry([RecordingVisitor(log, "a")])
        VesselReportBuilder(library=library, visitors=registry).build_report(eva_kerbal)

        assert ("a", "texts") not in log

    def test_unowned_then_owned_has_no_residue(self, library):
        builder = VesselReportBuilder(library=library)
        vessel = Vessel(
            name="Station",
            discovery_level=DiscoveryLevel.APPEARANCE,
            parts=[make_part(3.0, modules=["KerbalSeat"])],
            crew_count=2,
        )

        assert builder.build_report(vessel) is None
        assert builder.build_report(vessel) is None

        vessel.discovery_level = DiscoveryLevel.OWNED
        report = builder.build_report(vessel)
        assert report.lines == ("", "Crew: 2, Parts: 1, Mass: 3.00t", "Has command seat")

    def test_reused_builder_resets_between_vessels(self, library, two_part_vessel):
        builder = VesselReportBuilder(library=library)
        builder.build_report(two_part_vessel)

        report = builder.build_report(Vessel(name="Lander", parts=[make_part(1.0, [("Oxidizer", 10, 10)])]))
        assert report.lines == ("Oxidizer: 10.00 / 10.00", "", "Crew: 0, Parts: 1, Mass: 1.05t", "No command pod")

    def test_invalid_visitor_state_propagates(self, library, two_part_vessel):
        class BrokenVisitor(CommandStatusVisitor):
            def visit(self, part):
                self.status = "corrupt"

        builder = VesselReportBuilder(library=library, visitors=VisitorRegistry([BrokenVisitor()]))

        with pytest.raises(InvalidVisitorStateError):
            builder.build_report(two_part_vessel)

    def test_default_library_is_stock(self):
        builder = VesselReportBuilder()
        assert builder.library.density("LiquidFuel") == ResourceLibrary.stock().density("LiquidFuel")

    def test_report_is_immutable(self, library, two_part_vessel):
        report = VesselReportBuilder(library=library).build_report(two_part_vessel)
        with pytest.raises(Exception):
            report.title = "Other"
