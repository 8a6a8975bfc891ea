"""Structured commands produced by the line parser.

The parser is the only component that looks at raw text. Everything
downstream consumes these models, discriminated on ``kind``.
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field, TypeAdapter

from trafficlog._constants import PLATE_PATTERN, ROAD_NUMBER_PATTERN
from trafficlog.models._base import TrafficBaseModel
from trafficlog.models.distance import FixedPointDistance

_PLATE_FIELD_PATTERN = rf"^{PLATE_PATTERN}$"
_ROAD_FIELD_PATTERN = rf"^[A-Z]{ROAD_NUMBER_PATTERN}$"


class UpdateRecord(TrafficBaseModel):
    """A car seen at a point of a road."""

    kind: Literal["update"] = "update"
    plate: str = Field(pattern=_PLATE_FIELD_PATTERN)
    road: str = Field(pattern=_ROAD_FIELD_PATTERN)
    """Road label exactly as read, e.g. ``"A12"``."""
    point: FixedPointDistance


class QueryAll(TrafficBaseModel):
    kind: Literal["query_all"] = "query_all"


class QueryCar(TrafficBaseModel):
    kind: Literal["query_car"] = "query_car"
    plate: str = Field(pattern=_PLATE_FIELD_PATTERN)


class QueryRoad(TrafficBaseModel):
    kind: Literal["query_road"] = "query_road"
    road: str = Field(pattern=_ROAD_FIELD_PATTERN)


Command = Annotated[UpdateRecord | QueryAll | QueryCar | QueryRoad, Field(discriminator="kind")]
"""Any command the monitor can dispatch."""

Query = QueryAll | QueryCar | QueryRoad

COMMAND_ADAPTER: TypeAdapter[Command] = TypeAdapter(Command)
"""Validates a plain mapping (e.g. ``{"kind": "query_all"}``) into a command."""
