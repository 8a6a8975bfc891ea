from __future__ import annotations

import logging

import pytest

from trafficlog.config import TrafficConfig
from trafficlog.exceptions import TrafficConfigError


def test_defaults() -> None:
    config = TrafficConfig()

    assert config.categories == ("A", "S")
    assert config.input_encoding == "utf-8"
    assert config.effective_log_level == logging.WARNING


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRAFFICLOG_MOTORWAY_CATEGORY", "M")
    monkeypatch.setenv("TRAFFICLOG_OTHER_CATEGORY", " R ")
    monkeypatch.setenv("TRAFFICLOG_LOG_LEVEL", "info")
    monkeypatch.setenv("TRAFFICLOG_TRACE_ENABLED", "no")

    config = TrafficConfig.from_env()

    assert config.categories == ("M", "R")
    assert config.effective_log_level == logging.INFO
    assert config.trace_enabled is False


def test_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRAFFICLOG_MOTORWAY_CATEGORY", "M")
    monkeypatch.setenv("TRAFFICLOG_TRACE_ENABLED", "yes")

    config = TrafficConfig.from_env(motorway_category="A", trace_enabled=False)

    assert config.motorway_category == "A"
    assert config.trace_enabled is False


def test_trace_forces_debug(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TRAFFICLOG_TRACE_ENABLED", "1")

    assert TrafficConfig.from_env().effective_log_level == logging.DEBUG


@pytest.mark.parametrize(
    "kwargs",
    [
        {"motorway_category": "AB"},
        {"motorway_category": "a"},
        {"other_category": ""},
        {"motorway_category": "S"},
        {"log_level": "LOUD"},
    ],
)
def test_invalid_values_rejected(kwargs: dict[str, str]) -> None:
    with pytest.raises(TrafficConfigError):
        TrafficConfig(**kwargs)
