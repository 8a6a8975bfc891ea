"""Data models for trafficlog commands and query results."""

from trafficlog.models._base import TrafficBaseModel
from trafficlog.models.commands import COMMAND_ADAPTER, Command, Query, QueryAll, QueryCar, QueryRoad, UpdateRecord
from trafficlog.models.distance import FixedPointDistance, decode, encode, format_distance
from trafficlog.models.reports import CarReport, Report, RoadReport
from trafficlog.models.road import RoadKey

__all__ = [
    "COMMAND_ADAPTER",
    "CarReport",
    "Command",
    "FixedPointDistance",
    "Query",
    "QueryAll",
    "QueryCar",
    "QueryRoad",
    "Report",
    "RoadKey",
    "RoadReport",
    "TrafficBaseModel",
    "UpdateRecord",
    "decode",
    "encode",
    "format_distance",
]
