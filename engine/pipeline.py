"""
End-to-end positivity forecast: align the tested and positive series, smooth
both, compose the rate series, fit the SSA model on every rate and label the
clamped forecast with the days following the last aligned date.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from datetime import date, timedelta
from typing import Iterable, List, Optional

from engine.forecast import SSAForecaster, clamp_forecast
from engine.models import (
    DatedCount,
    ForecastConfig,
    ForecastPoint,
    PositivityForecast,
    RateObservation,
)
from engine.series import align, compose_rates, moving_average, smoothed_dates

log = logging.getLogger(__name__)


def positivity_rates(
    tested: Iterable[DatedCount],
    positive: Iterable[DatedCount],
    window: int,
) -> List[RateObservation]:
    aligned = align(tested, positive)
    tested_avg = moving_average([o.tested for o in aligned], window)
    positive_avg = moving_average([o.positive for o in aligned], window)
    dates = smoothed_dates([o.date for o in aligned], window)
    log.debug("positivity_rates: aligned=%d smoothed=%d window=%d", len(aligned), len(dates), window)
    return compose_rates(dates, tested_avg, positive_avg)


def forecast_dates(last_date: date, horizon: int) -> List[date]:
    return [last_date + timedelta(days=i + 1) for i in range(horizon)]


def forecast(
    tested: Iterable[DatedCount],
    positive: Iterable[DatedCount],
    config: Optional[ForecastConfig] = None,
) -> PositivityForecast:
    if config is None:
        config = ForecastConfig.from_settings()
    config.validate()

    actual = positivity_rates(tested, positive, config.moving_average_window)

    model = SSAForecaster(
        window_size=config.ssa_window_size,
        series_length=config.ssa_series_length,
        confidence_level=config.confidence_level,
        train_size=config.ssa_train_size,
        rank=config.ssa_rank,
        energy_threshold=config.ssa_energy_threshold,
        stabilize=config.ssa_stabilize,
        max_rank=config.ssa_max_rank,
    )
    result = model.fit([r.positive_rate for r in actual]).forecast(config.horizon)
    clamped = clamp_forecast(result)

    last_date = actual[-1].date
    points = [
        ForecastPoint(date=d, rate=rate)
        for d, rate in zip(forecast_dates(last_date, config.horizon), clamped.forecasted_rates)
    ]
    log.info(
        "forecast: %d actual rates through %s, rank=%d, horizon=%d",
        len(actual), last_date.isoformat(), model.fitted_rank, config.horizon,
    )
    return PositivityForecast(actual=actual, result=result, forecast=points)
