from __future__ import annotations

import pytest

from trafficlog.exceptions import InvalidRoadError
from trafficlog.models.road import RoadKey


def test_parse_splits_category_and_number() -> None:
    road = RoadKey.parse("S123")

    assert road.category == "S"
    assert road.number == 123
    assert road.label == "S123"
    assert str(road) == "S123"


def test_roads_sort_by_number_then_category() -> None:
    labels = ["A2", "S1", "A10", "A1", "S2"]

    ordered = sorted(RoadKey.parse(label) for label in labels)

    assert [road.label for road in ordered] == ["A1", "S1", "A2", "S2", "A10"]


def test_road_keys_are_hashable_and_compare_by_value() -> None:
    assert RoadKey.parse("A7") == RoadKey(category="A", number=7)
    assert len({RoadKey.parse("A7"), RoadKey.parse("A7"), RoadKey.parse("S7")}) == 2


@pytest.mark.parametrize("label", ["", "A", "A0", "A01", "A1000", "12", "a1", "AB1", "A1\u0663"])
def test_parse_rejects_bad_labels(label: str) -> None:
    with pytest.raises(InvalidRoadError):
        RoadKey.parse(label)
