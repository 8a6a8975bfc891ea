"""Journey lifecycle: applies update records to the database."""

from __future__ import annotations

import logging

from trafficlog._constants import MOTORWAY_CATEGORY
from trafficlog.models.commands import UpdateRecord
from trafficlog.models.road import RoadKey
from trafficlog.state.events import JourneyOutcome, JourneyUpdate
from trafficlog.state.store import OpenJourney, TrafficDatabase

_logger = logging.getLogger(__name__)


class UpdateEngine:
    """Apply update records to a :class:`TrafficDatabase`.

    A car's first record on a road opens a journey. The next record on
    the same road closes it and credits ``|exit - entry|`` to the car
    (motorway or other slot, by road category) and to the road. A record
    on a different road drops the open journey and starts a new one.
    """

    def __init__(self, database: TrafficDatabase, *, motorway_category: str = MOTORWAY_CATEGORY) -> None:
        self._db = database
        self._motorway_category = motorway_category

    def apply(self, record: UpdateRecord, *, line_number: int, line: str) -> JourneyUpdate:
        """Apply *record*, read from input line *line_number* with text *line*."""
        current = self._db.open_journey(record.plate)

        if current is None:
            self._start(record, line_number=line_number, line=line)
            return JourneyUpdate(plate=record.plate, outcome=JourneyOutcome.STARTED)

        if current.road != record.road:
            _logger.debug(
                "Inconsistent road plate=%s open=%s (line %d) new=%s (line %d)",
                record.plate,
                current.road,
                current.line_number,
                record.road,
                line_number,
            )
            self._db.end_journey(record.plate)
            self._start(record, line_number=line_number, line=line)
            return JourneyUpdate(plate=record.plate, outcome=JourneyOutcome.RESTARTED, stale=current)

        delta = abs(record.point - current.entry_point)
        road = RoadKey.parse(record.road)
        self._db.add_distance(
            record.plate,
            road,
            delta,
            motorway=road.category == self._motorway_category,
        )
        self._db.end_journey(record.plate)
        _logger.debug("Journey completed plate=%s road=%s delta=%d", record.plate, road, delta)
        return JourneyUpdate(plate=record.plate, outcome=JourneyOutcome.COMPLETED, delta=delta)

    def _start(self, record: UpdateRecord, *, line_number: int, line: str) -> None:
        self._db.start_journey(
            record.plate,
            OpenJourney(line_number=line_number, line=line, road=record.road, entry_point=record.point),
        )
        _logger.debug("Journey started plate=%s road=%s line=%d", record.plate, record.road, line_number)
