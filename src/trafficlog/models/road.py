"""Road identifiers."""

from __future__ import annotations

import re

from pydantic import Field

from trafficlog._constants import MAX_ROAD_NUMBER, ROAD_NUMBER_PATTERN
from trafficlog.exceptions import InvalidRoadError
from trafficlog.models._base import TrafficBaseModel

_ROAD_LABEL_RE = re.compile(rf"([A-Z])({ROAD_NUMBER_PATTERN})", re.ASCII)


class RoadKey(TrafficBaseModel):
    """A road, identified by its category letter and number.

    Roads sort by number first and by category on ties, so ``A1``
    comes before ``S1``, which comes before ``A2``.
    """

    category: str = Field(pattern=r"^[A-Z]$")
    number: int = Field(ge=1, le=MAX_ROAD_NUMBER)

    @classmethod
    def parse(cls, label: str) -> RoadKey:
        """Split a label such as ``"A12"`` into category and number."""
        match = _ROAD_LABEL_RE.fullmatch(label.strip())
        if match is None:
            raise InvalidRoadError(f"not a road label: {label!r}")
        return cls(category=match.group(1), number=int(match.group(2)))

    @property
    def label(self) -> str:
        return f"{self.category}{self.number}"

    def sort_key(self) -> tuple[int, str]:
        return (self.number, self.category)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RoadKey):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    def __str__(self) -> str:
        return self.label
