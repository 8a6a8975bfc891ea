"""Read-only queries over the database."""

from __future__ import annotations

from trafficlog._constants import MOTORWAY_CATEGORY, OTHER_CATEGORY
from trafficlog.models.reports import CarReport, Report, RoadReport
from trafficlog.models.road import RoadKey
from trafficlog.state.store import CarAccumulator, TrafficDatabase


class QueryEngine:
    """Answer "all", "car" and "road" queries.

    Unknown cars and roads yield an empty result, never an error.
    """

    def __init__(
        self,
        database: TrafficDatabase,
        *,
        motorway_category: str = MOTORWAY_CATEGORY,
        other_category: str = OTHER_CATEGORY,
    ) -> None:
        self._db = database
        self._motorway_category = motorway_category
        self._other_category = other_category

    def _car_report(self, plate: str, totals: CarAccumulator) -> CarReport:
        return CarReport(
            plate=plate,
            motorway=totals.motorway_distance,
            other=totals.other_distance,
            motorway_category=self._motorway_category,
            other_category=self._other_category,
        )

    def all(self) -> list[Report]:
        """Every car by plate, then every road by number and category."""
        reports: list[Report] = [self._car_report(plate, totals) for plate, totals in self._db.cars()]
        reports.extend(RoadReport(road=road, distance=total) for road, total in self._db.roads())
        return reports

    def car(self, plate: str) -> list[Report]:
        totals = self._db.car_totals(plate)
        if totals is None:
            return []
        return [self._car_report(plate, totals)]

    def road(self, label: str) -> list[Report]:
        road = RoadKey.parse(label)
        total = self._db.road_total(road)
        if total is None:
            return []
        return [RoadReport(road=road, distance=total)]
