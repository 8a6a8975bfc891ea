"""State layer.

This package owns the journey-tracking database and the only code
allowed to change it (:class:`UpdateEngine`) or read it
(:class:`QueryEngine`).
"""

from trafficlog.state.events import JourneyOutcome, JourneyUpdate
from trafficlog.state.query import QueryEngine
from trafficlog.state.store import CarAccumulator, OpenJourney, RoadAccumulator, TrafficDatabase
from trafficlog.state.update import UpdateEngine

__all__ = [
    "CarAccumulator",
    "JourneyOutcome",
    "JourneyUpdate",
    "OpenJourney",
    "QueryEngine",
    "RoadAccumulator",
    "TrafficDatabase",
    "UpdateEngine",
]
