"""Fixed-point distances with exactly one fractional digit.

Distances arrive as ``"12,3"`` and are kept as the integer ``123`` so
every sum and difference stays exact.
"""

from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import BeforeValidator, Field

from trafficlog._constants import DISTANCE_PATTERN, DISTANCE_SCALE, DISTANCE_SEPARATOR
from trafficlog.exceptions import InvalidDistanceError

_DISTANCE_RE = re.compile(DISTANCE_PATTERN, re.ASCII)


def encode(text: str) -> int:
    """Convert ``"W,f"`` to ``10 * W + f``.

    Raises :class:`InvalidDistanceError` when *text* is not in the
    input grammar (1-8 integer digits without a leading zero, one
    fractional digit).
    """
    if not isinstance(text, str) or _DISTANCE_RE.fullmatch(text) is None:
        raise InvalidDistanceError(f"not a fixed-point distance: {text!r}")
    whole, frac = text.split(DISTANCE_SEPARATOR)
    return DISTANCE_SCALE * int(whole) + int(frac)


def decode(value: int) -> tuple[int, int]:
    """Split an encoded distance into its whole and fractional parts."""
    if value < 0:
        raise InvalidDistanceError(f"distance must be non-negative, got {value}")
    return divmod(value, DISTANCE_SCALE)


def format_distance(value: int) -> str:
    whole, frac = decode(value)
    return f"{whole}{DISTANCE_SEPARATOR}{frac}"


def parse_distance(value: Any) -> Any:
    """Accept both encoded integers and ``"W,f"`` text."""
    if isinstance(value, str):
        return encode(value.strip())
    return value


FixedPointDistance = Annotated[int, BeforeValidator(parse_distance), Field(ge=0)]
"""Annotated type that coerces ``"W,f"`` text to its encoded integer."""
