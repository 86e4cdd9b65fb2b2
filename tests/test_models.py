"""
Test cases for the forecast configuration struct.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import pytest

from config import settings
from engine.errors import InvalidConfidenceLevel, InvalidForecastConfig
from engine.models import ForecastConfig


def test_defaults_match_reference_run():
    config = ForecastConfig()
    assert (config.moving_average_window, config.ssa_window_size, config.ssa_series_length) == (7, 14, 30)
    assert config.horizon == 90
    assert config.confidence_level == 0.95
    config.validate()


def test_from_settings_applies_overrides_and_skips_none(monkeypatch):
    monkeypatch.setattr(settings, "ssa_series_length", 45)
    config = ForecastConfig.from_settings(horizon=10, ssa_rank=None)
    assert config.horizon == 10
    assert config.ssa_series_length == 45
    assert config.ssa_rank is None


def test_from_settings_keeps_false_overrides():
    config = ForecastConfig.from_settings(ssa_stabilize=False, ssa_max_rank=3)
    assert config.ssa_stabilize is False
    assert config.ssa_max_rank == 3


@pytest.mark.parametrize("level", [0.0, 1.0, 2.0])
def test_confidence_level_checked_first(level):
    # also invalid horizon: the confidence level must be reported
    with pytest.raises(InvalidConfidenceLevel):
        ForecastConfig(confidence_level=level, horizon=0).validate()


@pytest.mark.parametrize(
    "overrides",
    [
        {"moving_average_window": 0},
        {"ssa_window_size": 1},
        {"ssa_series_length": 14},
        {"horizon": 0},
        {"ssa_energy_threshold": 0.0},
        {"ssa_rank": 0},
        {"ssa_max_rank": 0},
    ],
)
def test_invalid_config(overrides):
    with pytest.raises(InvalidForecastConfig):
        ForecastConfig(**overrides).validate()
