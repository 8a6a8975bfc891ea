"""trafficlog - journey and distance bookkeeping for road traffic records."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("trafficlog")
except PackageNotFoundError:
    __version__ = "0+local"
from trafficlog.config import TrafficConfig
from trafficlog.exceptions import (
    InvalidDistanceError,
    InvalidRoadError,
    MalformedLineError,
    TrafficConfigError,
    TrafficError,
)
from trafficlog.ingestion import LineParser, parse_line
from trafficlog.models import (
    CarReport,
    Command,
    QueryAll,
    QueryCar,
    QueryRoad,
    RoadKey,
    RoadReport,
    UpdateRecord,
)
from trafficlog.monitor import LineResult, RunSummary, TrafficMonitor
from trafficlog.state import (
    JourneyOutcome,
    JourneyUpdate,
    OpenJourney,
    QueryEngine,
    TrafficDatabase,
    UpdateEngine,
)

__all__ = [
    "__version__",
    "CarReport",
    "Command",
    "InvalidDistanceError",
    "InvalidRoadError",
    "JourneyOutcome",
    "JourneyUpdate",
    "LineParser",
    "LineResult",
    "MalformedLineError",
    "OpenJourney",
    "QueryAll",
    "QueryCar",
    "QueryEngine",
    "QueryRoad",
    "RoadKey",
    "RoadReport",
    "RunSummary",
    "TrafficConfig",
    "TrafficConfigError",
    "TrafficDatabase",
    "TrafficError",
    "TrafficMonitor",
    "UpdateEngine",
    "UpdateRecord",
    "parse_line",
]
