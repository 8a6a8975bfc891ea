"""Base model for trafficlog value objects.

Every command, report and journey model inherits from
:class:`TrafficBaseModel`: frozen, strict about unknown fields and
stripping surrounding whitespace from text fields.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TrafficBaseModel(BaseModel):
    """Immutable base for trafficlog models."""

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        str_strip_whitespace=True,
    )
