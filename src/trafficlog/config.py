"""Runtime configuration for trafficlog."""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import Any

from trafficlog._constants import MOTORWAY_CATEGORY, OTHER_CATEGORY
from trafficlog.exceptions import TrafficConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _check_category(name: str, value: str) -> None:
    if len(value) != 1 or not value.isascii() or not value.isupper():
        raise TrafficConfigError(f"{name} must be a single uppercase letter, got {value!r}")


@dataclasses.dataclass(frozen=True)
class TrafficConfig:
    """Monitor configuration.

    Parameters
    ----------
    motorway_category : str
        Road category letter whose journeys count towards the motorway
        slot of a car's totals.
    other_category : str
        The only other accepted road category letter.
    input_encoding : str
        Encoding used when the CLI opens an input file.
    log_level : str
        Name of the root log level set up by the CLI.
    trace_enabled : bool
        Force DEBUG logging of every dispatched command and journey
        transition.
    """

    motorway_category: str = MOTORWAY_CATEGORY
    other_category: str = OTHER_CATEGORY
    input_encoding: str = "utf-8"
    log_level: str = "WARNING"
    trace_enabled: bool = False

    def __post_init__(self) -> None:
        _check_category("motorway_category", self.motorway_category)
        _check_category("other_category", self.other_category)
        if self.motorway_category == self.other_category:
            raise TrafficConfigError("motorway_category and other_category must differ")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise TrafficConfigError(f"unknown log level {self.log_level!r}")

    @property
    def categories(self) -> tuple[str, str]:
        """Accepted road categories, motorway first."""
        return (self.motorway_category, self.other_category)

    @property
    def effective_log_level(self) -> int:
        if self.trace_enabled:
            return logging.DEBUG
        level: int = logging.getLevelName(self.log_level.upper())
        return level

    @classmethod
    def from_env(cls, **overrides: Any) -> TrafficConfig:
        """Create configuration from ``TRAFFICLOG_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ

        _ENV_CONFIG_MAP = {
            "TRAFFICLOG_MOTORWAY_CATEGORY": "motorway_category",
            "TRAFFICLOG_OTHER_CATEGORY": "other_category",
            "TRAFFICLOG_INPUT_ENCODING": "input_encoding",
            "TRAFFICLOG_LOG_LEVEL": "log_level",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val.strip()

        if "trace_enabled" not in overrides:
            config_kwargs["trace_enabled"] = _env_bool(env.get("TRAFFICLOG_TRACE_ENABLED"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
