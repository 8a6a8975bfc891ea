"""Results of applying an update record to the database."""

from __future__ import annotations

from enum import StrEnum

from pydantic import Field

from trafficlog.models._base import TrafficBaseModel
from trafficlog.state.store import OpenJourney


class JourneyOutcome(StrEnum):
    STARTED = "started"
    COMPLETED = "completed"
    RESTARTED = "restarted"


class JourneyUpdate(TrafficBaseModel):
    """What one update record did to its car's journey.

    ``RESTARTED`` means the car turned up on a different road than its
    open journey; ``stale`` then holds the journey that was dropped so
    the caller can report the line that opened it.
    """

    plate: str
    outcome: JourneyOutcome
    delta: int | None = Field(default=None, description="Distance credited by a completed journey.")
    stale: OpenJourney | None = None
