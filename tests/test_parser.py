from __future__ import annotations

import pytest

from trafficlog.exceptions import MalformedLineError
from trafficlog.ingestion.parser import LineParser, parse_line
from trafficlog.models.commands import COMMAND_ADAPTER, QueryAll, QueryCar, QueryRoad, UpdateRecord


def test_update_record_line() -> None:
    commands = parse_line("  WA12345   A2  17,5 ", 1)

    assert commands == [UpdateRecord(plate="WA12345", road="A2", point=175)]


def test_query_all_line() -> None:
    assert parse_line(" ? ", 1) == [QueryAll()]


def test_query_car_line() -> None:
    assert parse_line("?ABC123", 1) == [QueryCar(plate="ABC123")]
    assert parse_line("? abc123", 1) == [QueryCar(plate="abc123")]


def test_query_road_line() -> None:
    assert parse_line("?S7", 1) == [QueryRoad(road="S7")]


def test_query_matching_plate_and_road_yields_both_in_order() -> None:
    assert parse_line("?A12", 1) == [QueryCar(plate="A12"), QueryRoad(road="A12")]


@pytest.mark.parametrize(
    "line",
    [
        "not a valid line",
        "   ",
        "AB A1 1,0",
        "ABCDEFGHIJKL A1 1,0",
        "ABC123 B1 1,0",
        "ABC123 A0 1,0",
        "ABC123 A1000 1,0",
        "ABC123 A1 01,0",
        "ABC123 A1 1,05",
        "ABC123 A1 1.0",
        "ABC123 A1",
        "??",
        "?AB",
        "? ABC 123",
        "ABC A1\u0663 1,0",
        "ABC A1 2\u0665,0",
        "ABC\u2003A1 1,0",
        "?A1\u0663",
    ],
)
def test_malformed_lines_raise(line: str) -> None:
    with pytest.raises(MalformedLineError) as excinfo:
        parse_line(line, 7)

    assert excinfo.value.line_number == 7
    assert excinfo.value.line == line


def test_custom_categories() -> None:
    parser = LineParser(("M", "R"))

    assert parser.parse("ABC123 M4 1,0", 1) == [UpdateRecord(plate="ABC123", road="M4", point=10)]
    with pytest.raises(MalformedLineError):
        parser.parse("ABC123 A4 1,0", 1)


def test_command_adapter_discriminates_on_kind() -> None:
    command = COMMAND_ADAPTER.validate_python({"kind": "update", "plate": "ABC123", "road": "S2", "point": "3,4"})

    assert command == UpdateRecord(plate="ABC123", road="S2", point=34)
    assert COMMAND_ADAPTER.validate_python({"kind": "query_road", "road": "A1"}) == QueryRoad(road="A1")
