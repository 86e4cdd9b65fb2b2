"""
Test cases for positivity-rate composition.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import math
from datetime import date, timedelta

import pytest

from engine.errors import SeriesLengthMismatch
from engine.series.rates import compose_rates, smoothed_dates


def _dates(n):
    return [date(2021, 1, 1) + timedelta(days=i) for i in range(n)]


def test_rate_is_percentage():
    rows = compose_rates(_dates(2), [100.0, 200.0], [10.0, 50.0])
    assert [r.positive_rate for r in rows] == pytest.approx([10.0, 25.0])


def test_zero_tested_reports_zero_rate():
    rows = compose_rates(_dates(1), [0.0], [5.0])
    assert rows[0].positive_rate == 0.0
    assert not math.isnan(rows[0].positive_rate)


def test_rate_may_exceed_hundred():
    rows = compose_rates(_dates(1), [10.0], [20.0])
    assert rows[0].positive_rate == pytest.approx(200.0)


def test_length_mismatch():
    with pytest.raises(SeriesLengthMismatch):
        compose_rates(_dates(3), [1.0, 2.0], [1.0, 2.0])


def test_smoothed_dates_drop_leading_window():
    dates = _dates(10)
    kept = smoothed_dates(dates, 7)
    assert len(kept) == 4
    assert kept[0] == dates[6]
    assert kept[-1] == dates[-1]
