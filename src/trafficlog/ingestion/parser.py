"""Regex grammar for input lines.

Recognised lines (surrounding whitespace allowed)::

    PLATE ROAD POINT      e.g. "WA12345 A2 17,5"
    ?                     all cars and roads
    ?PLATE                one car
    ?ROAD                 one road

A query body such as ``A12`` is both a valid plate and a valid road
label; it yields a car query followed by a road query.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Sequence

from trafficlog._constants import (
    DISTANCE_PATTERN,
    MOTORWAY_CATEGORY,
    OTHER_CATEGORY,
    PLATE_PATTERN,
    QUERY_MARK,
    ROAD_NUMBER_PATTERN,
)
from trafficlog.exceptions import MalformedLineError
from trafficlog.models.commands import Command, QueryAll, QueryCar, QueryRoad, UpdateRecord

_logger = logging.getLogger(__name__)

_DEFAULT_CATEGORIES = (MOTORWAY_CATEGORY, OTHER_CATEGORY)


class LineParser:
    """Parse input lines into commands for a given set of road categories."""

    def __init__(self, categories: Sequence[str] = _DEFAULT_CATEGORIES) -> None:
        self.categories = tuple(categories)
        road = rf"[{re.escape(''.join(self.categories))}]{ROAD_NUMBER_PATTERN}"
        mark = re.escape(QUERY_MARK)
        self._update_re = re.compile(rf"\s*({PLATE_PATTERN})\s+({road})\s+({DISTANCE_PATTERN})\s*", re.ASCII)
        self._all_re = re.compile(rf"\s*{mark}\s*", re.ASCII)
        self._car_re = re.compile(rf"\s*{mark}\s*({PLATE_PATTERN})\s*", re.ASCII)
        self._road_re = re.compile(rf"\s*{mark}\s*({road})\s*", re.ASCII)

    def parse(self, line: str, line_number: int) -> list[Command]:
        """Return the commands carried by *line*.

        Raises :class:`MalformedLineError` when the line matches no
        grammar. Empty lines are the caller's business.
        """
        match = self._update_re.fullmatch(line)
        if match is not None:
            return [UpdateRecord(plate=match.group(1), road=match.group(2), point=match.group(3))]

        if self._all_re.fullmatch(line) is not None:
            return [QueryAll()]

        commands: list[Command] = []
        match = self._car_re.fullmatch(line)
        if match is not None:
            commands.append(QueryCar(plate=match.group(1)))
        match = self._road_re.fullmatch(line)
        if match is not None:
            commands.append(QueryRoad(road=match.group(1)))

        if not commands:
            _logger.debug("Malformed line %d: %r", line_number, line)
            raise MalformedLineError(line_number, line)
        return commands


_default_parser = LineParser()


def parse_line(line: str, line_number: int) -> list[Command]:
    """Parse *line* with the default ``A``/``S`` road categories."""
    return _default_parser.parse(line, line_number)
