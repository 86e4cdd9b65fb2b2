"""
Forecast service running the positivity pipeline off the event loop and
shaping its output for the API.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import asyncio
from dataclasses import asdict
from typing import List, Optional

from api.responses import ForecastResponse, RatePoint
from datasources.provider import DataSourceProvider
from engine.models import DatedCount, ForecastConfig, PositivityForecast
from engine.pipeline import forecast


def to_response(result: PositivityForecast, config: ForecastConfig, source: Optional[str] = None) -> ForecastResponse:
    return ForecastResponse(
        actual=[RatePoint(date=r.date, rate=r.positive_rate) for r in result.actual],
        forecast=[RatePoint(date=p.date, rate=p.rate) for p in result.forecast],
        lower_bound=list(result.result.lower_bound),
        upper_bound=list(result.result.upper_bound),
        config=asdict(config),
        source=source,
    )


async def run_forecast(
    tested: List[DatedCount],
    positive: List[DatedCount],
    config: ForecastConfig,
    source: Optional[str] = None,
) -> ForecastResponse:
    result = await asyncio.to_thread(forecast, tested, positive, config)
    return to_response(result, config, source=source)


async def run_source_forecast(
    provider: DataSourceProvider,
    config: ForecastConfig,
    refresh: bool = False,
) -> ForecastResponse:
    # fail on a bad configuration before touching the network
    config.validate()
    tested, positive = await provider.load_counts(refresh=refresh)
    return await run_forecast(tested, positive, config, source="mhlw")
