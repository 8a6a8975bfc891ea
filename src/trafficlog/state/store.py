"""In-memory journey and distance database.

Three maps live here: open journeys by plate, distance totals by plate,
and distance totals by road. Nothing outside this module holds a
reference into them; readers get copies.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from trafficlog._constants import UNSET_DISTANCE
from trafficlog.models._base import TrafficBaseModel
from trafficlog.models.distance import FixedPointDistance
from trafficlog.models.road import RoadKey


def _accumulate(total: int, delta: int) -> int:
    """Add *delta* to a running total that may still be unset.

    The unset sentinel is bumped to zero first, so the first
    contribution yields exactly *delta*.
    """
    if total == UNSET_DISTANCE:
        total += 1
    return total + delta


def _shown(total: int) -> int | None:
    return None if total == UNSET_DISTANCE else total


class OpenJourney(TrafficBaseModel):
    """A car's journey that has an entry point but no exit yet."""

    # The line text is kept verbatim for error reports.
    model_config = ConfigDict(str_strip_whitespace=False)

    line_number: int
    line: str
    road: str
    entry_point: FixedPointDistance


class CarAccumulator(BaseModel):
    model_config = ConfigDict(extra="forbid")

    motorway: int = UNSET_DISTANCE
    other: int = UNSET_DISTANCE

    @property
    def motorway_distance(self) -> int | None:
        return _shown(self.motorway)

    @property
    def other_distance(self) -> int | None:
        return _shown(self.other)


class RoadAccumulator(BaseModel):
    model_config = ConfigDict(extra="forbid")

    distance: int = UNSET_DISTANCE

    @property
    def total(self) -> int | None:
        return _shown(self.distance)


class TrafficDatabase:
    """In-memory store of open journeys and accumulated distances.

    Given the same sequence of updates it always ends in the same state;
    there is no clock and no randomness involved.
    """

    def __init__(self) -> None:
        self._open_journeys: dict[str, OpenJourney] = {}
        self._cars: dict[str, CarAccumulator] = {}
        self._roads: dict[RoadKey, RoadAccumulator] = {}

    # ------------------------------------------------------------------
    # Open journeys
    # ------------------------------------------------------------------

    def open_journey(self, plate: str) -> OpenJourney | None:
        return self._open_journeys.get(plate)

    def start_journey(self, plate: str, journey: OpenJourney) -> None:
        self._open_journeys[plate] = journey

    def end_journey(self, plate: str) -> OpenJourney:
        """Remove and return the open journey of *plate*.

        Raises :class:`KeyError` when the car has no open journey.
        """
        return self._open_journeys.pop(plate)

    @property
    def open_journey_count(self) -> int:
        return len(self._open_journeys)

    # ------------------------------------------------------------------
    # Accumulators
    # ------------------------------------------------------------------

    def _car(self, plate: str) -> CarAccumulator:
        car = self._cars.get(plate)
        if car is None:
            car = CarAccumulator()
            self._cars[plate] = car
        return car

    def _road(self, road: RoadKey) -> RoadAccumulator:
        acc = self._roads.get(road)
        if acc is None:
            acc = RoadAccumulator()
            self._roads[road] = acc
        return acc

    def add_distance(self, plate: str, road: RoadKey, delta: int, *, motorway: bool) -> None:
        """Credit a completed journey of *delta* to the car and to the road."""
        if delta < 0:
            raise ValueError(f"journey distance must be non-negative, got {delta}")
        car = self._car(plate)
        if motorway:
            car.motorway = _accumulate(car.motorway, delta)
        else:
            car.other = _accumulate(car.other, delta)
        acc = self._road(road)
        acc.distance = _accumulate(acc.distance, delta)

    def car_totals(self, plate: str) -> CarAccumulator | None:
        car = self._cars.get(plate)
        return car.model_copy() if car is not None else None

    def road_total(self, road: RoadKey) -> int | None:
        acc = self._roads.get(road)
        return acc.total if acc is not None else None

    def cars(self) -> list[tuple[str, CarAccumulator]]:
        """All cars with totals, ordered by plate."""
        return [(plate, self._cars[plate].model_copy()) for plate in sorted(self._cars)]

    def roads(self) -> list[tuple[RoadKey, int]]:
        """All roads with totals, ordered by number then category."""
        result: list[tuple[RoadKey, int]] = []
        for road in sorted(self._roads, key=RoadKey.sort_key):
            total = self._roads[road].total
            if total is not None:
                result.append((road, total))
        return result

    def clear(self) -> None:
        self._open_journeys.clear()
        self._cars.clear()
        self._roads.clear()
