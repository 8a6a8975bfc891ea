"""Line-by-line driver tying the parser to the state layer."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TextIO

from pydantic import BaseModel, ConfigDict

from trafficlog._constants import format_error_line
from trafficlog.config import TrafficConfig
from trafficlog.exceptions import MalformedLineError
from trafficlog.ingestion.parser import LineParser
from trafficlog.models.commands import Command, QueryAll, QueryCar, QueryRoad, UpdateRecord
from trafficlog.models.reports import Report
from trafficlog.state.events import JourneyOutcome
from trafficlog.state.query import QueryEngine
from trafficlog.state.store import TrafficDatabase
from trafficlog.state.update import UpdateEngine

_logger = logging.getLogger(__name__)


class LineResult(BaseModel):
    """Output and error lines produced by one input line."""

    model_config = ConfigDict(frozen=True)

    output: list[str] = []
    errors: list[str] = []


class RunSummary(BaseModel):
    model_config = ConfigDict(frozen=True)

    lines_read: int = 0
    errors: int = 0


class TrafficMonitor:
    """Feed input lines through the parser into one :class:`TrafficDatabase`.

    Parameters
    ----------
    config : TrafficConfig or None
        Road categories and logging options. Defaults to ``TrafficConfig()``.
    database : TrafficDatabase or None
        Database to update. A fresh one is created when omitted.
    """

    def __init__(self, config: TrafficConfig | None = None, *, database: TrafficDatabase | None = None) -> None:
        self.config = config or TrafficConfig()
        self.database = database if database is not None else TrafficDatabase()
        self._parser = LineParser(self.config.categories)
        self._updates = UpdateEngine(self.database, motorway_category=self.config.motorway_category)
        self._queries = QueryEngine(
            self.database,
            motorway_category=self.config.motorway_category,
            other_category=self.config.other_category,
        )

    def query(self, command: QueryAll | QueryCar | QueryRoad) -> list[Report]:
        if isinstance(command, QueryAll):
            return self._queries.all()
        if isinstance(command, QueryCar):
            return self._queries.car(command.plate)
        if isinstance(command, QueryRoad):
            return self._queries.road(command.road)
        raise TypeError(f"unsupported query: {command!r}")

    def dispatch(self, command: Command, *, line_number: int, line: str) -> LineResult:
        """Run one parsed command and collect what it prints."""
        if self.config.trace_enabled:
            _logger.debug("Line %d dispatch %s", line_number, command.model_dump())

        if isinstance(command, UpdateRecord):
            update = self._updates.apply(command, line_number=line_number, line=line)
            if update.outcome == JourneyOutcome.RESTARTED and update.stale is not None:
                return LineResult(errors=[format_error_line(update.stale.line_number, update.stale.line)])
            return LineResult()

        return LineResult(output=[report.format_line() for report in self.query(command)])

    def process_line(self, line: str, line_number: int) -> LineResult:
        """Handle one input line (without its line terminator)."""
        if not line:
            return LineResult()
        try:
            commands = self._parser.parse(line, line_number)
        except MalformedLineError as exc:
            return LineResult(errors=[format_error_line(exc.line_number, exc.line)])

        output: list[str] = []
        errors: list[str] = []
        for command in commands:
            result = self.dispatch(command, line_number=line_number, line=line)
            output.extend(result.output)
            errors.extend(result.errors)
        return LineResult(output=output, errors=errors)

    def run(self, lines: Iterable[str], out: TextIO, err: TextIO) -> RunSummary:
        """Process *lines* until exhausted, writing results to *out* and *err*.

        Line numbers start at 1 and count empty lines too.
        """
        line_number = 0
        errors = 0
        for raw in lines:
            line_number += 1
            line = raw.removesuffix("\n")
            result = self.process_line(line, line_number)
            for text in result.output:
                out.write(text + "\n")
            for text in result.errors:
                err.write(text + "\n")
            errors += len(result.errors)

        _logger.debug("Input exhausted lines=%d errors=%d", line_number, errors)
        return RunSummary(lines_read=line_number, errors=errors)
