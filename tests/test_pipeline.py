"""
End-to-end tests of the positivity forecast pipeline.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import math
from datetime import date, timedelta

import pytest

from engine.errors import EmptyResult, InsufficientHistory, InvalidConfidenceLevel
from engine.models import ForecastConfig
from engine.pipeline import forecast, forecast_dates, positivity_rates


def _series(counts, days=70, start=date(2021, 3, 1)):
    tested = counts([1000 + 200 * math.sin(2 * math.pi * i / 7) for i in range(days)], start=start)
    positive = counts([40 + 0.5 * i + 10 * math.sin(2 * math.pi * i / 7) for i in range(days)], start=start)
    return tested, positive


def test_short_scenario_smooths_then_lacks_history(counts):
    tested = counts([100, 100, 100, 100, 100, 100, 100, 200])
    positive = counts([10, 10, 10, 10, 10, 10, 10, 40])

    rates = positivity_rates(tested, positive, 7)
    assert len(rates) == 2
    assert rates[0].positive_rate == pytest.approx(10.0)
    assert rates[0].date == date(2021, 1, 7)

    with pytest.raises(InsufficientHistory):
        forecast(tested, positive, ForecastConfig())


def test_full_run_shapes_and_dates(counts):
    tested, positive = _series(counts)
    config = ForecastConfig(horizon=30)
    out = forecast(tested, positive, config)

    assert len(out.actual) == 70 - 7 + 1
    assert out.last_actual_date == date(2021, 3, 1) + timedelta(days=69)
    assert len(out.forecast) == 30
    assert len(out.result) == 30
    assert out.forecast[0].date == out.last_actual_date + timedelta(days=1)
    assert out.forecast[-1].date == out.last_actual_date + timedelta(days=30)
    for point, raw in zip(out.forecast, out.result.forecasted_rates):
        assert point.rate >= 0
        assert point.rate == max(0.0, raw)


def test_forecast_dates_anchor_on_last_aligned_date(counts):
    start = date(2021, 3, 1)
    tested, positive = _series(counts, days=60, start=start)
    # positive series runs five days past the tested one
    positive = positive + counts([50] * 5, start=start + timedelta(days=60))
    out = forecast(tested, positive, ForecastConfig(horizon=3))
    assert out.last_actual_date == start + timedelta(days=59)
    assert [p.date for p in out.forecast] == forecast_dates(out.last_actual_date, 3)


def test_invalid_confidence_fails_before_alignment(counts):
    tested = counts([1, 2, 3], start=date(2021, 1, 1))
    positive = counts([1, 2, 3], start=date(2022, 1, 1))
    with pytest.raises(InvalidConfidenceLevel):
        forecast(tested, positive, ForecastConfig(confidence_level=1.5))


def test_disjoint_series(counts):
    tested = counts([1, 2, 3], start=date(2021, 1, 1))
    positive = counts([1, 2, 3], start=date(2022, 1, 1))
    with pytest.raises(EmptyResult):
        forecast(tested, positive, ForecastConfig())


def test_zero_tested_days_do_not_break_the_run(counts):
    tested, positive = _series(counts)
    tested = counts([0] * 10) + tested[10:]
    out = forecast(tested, positive, ForecastConfig(horizon=5))
    assert out.actual[0].positive_rate == 0.0
    assert all(math.isfinite(r.positive_rate) for r in out.actual)


def test_default_config_comes_from_settings(counts, monkeypatch):
    from config import settings

    monkeypatch.setattr(settings, "horizon", 12)
    tested, positive = _series(counts)
    out = forecast(tested, positive)
    assert len(out.forecast) == 12
