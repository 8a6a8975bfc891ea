"""Query result lines."""

from __future__ import annotations

from trafficlog._constants import MOTORWAY_CATEGORY, OTHER_CATEGORY
from trafficlog.models._base import TrafficBaseModel
from trafficlog.models.distance import format_distance
from trafficlog.models.road import RoadKey


class CarReport(TrafficBaseModel):
    """Distance totals of one car.

    A slot is ``None`` until a completed journey has contributed to it,
    and is then left out of the rendered line.
    """

    plate: str
    motorway: int | None = None
    other: int | None = None
    motorway_category: str = MOTORWAY_CATEGORY
    other_category: str = OTHER_CATEGORY

    def format_line(self) -> str:
        parts = [self.plate]
        if self.motorway is not None:
            parts.append(f"{self.motorway_category} {format_distance(self.motorway)}")
        if self.other is not None:
            parts.append(f"{self.other_category} {format_distance(self.other)}")
        return " ".join(parts)


class RoadReport(TrafficBaseModel):
    """Total distance travelled by all cars on one road."""

    road: RoadKey
    distance: int

    def format_line(self) -> str:
        return f"{self.road.label} {format_distance(self.distance)}"


Report = CarReport | RoadReport
