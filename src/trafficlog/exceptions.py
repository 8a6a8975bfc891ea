"""Custom exception hierarchy for trafficlog."""

from __future__ import annotations


class TrafficError(Exception):
    """Base exception for all trafficlog errors."""


class TrafficConfigError(TrafficError):
    """Invalid or missing configuration."""


class InvalidDistanceError(TrafficError, ValueError):
    """Text is not a one-decimal fixed-point distance (``"12,3"``)."""


class InvalidRoadError(TrafficError, ValueError):
    """Text is not a road label made of a category letter and a number."""


class MalformedLineError(TrafficError):
    """An input line matches none of the recognised command grammars.

    The monitor loop catches this, reports the line on the error stream
    and carries on with the next one.
    """

    def __init__(self, line_number: int, line: str) -> None:
        self.line_number = line_number
        self.line = line
        super().__init__(f"malformed line {line_number}: {line!r}")
