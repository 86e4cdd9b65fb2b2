"""
Forecast routes: positivity-rate forecast over caller-supplied series or over
the cached MHLW daily CSV files.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from fastapi import APIRouter

from api.requests import ForecastRequest, MhlwForecastRequest
from api.responses import ForecastResponse
from api.routes.common import get_provider, to_config
from api.routes.exception import handle_exceptions
from engine.models import DatedCount
from services.forecast_service import run_forecast, run_source_forecast

router = APIRouter(tags=["Forecast"])


@router.post("/forecast/positivity", response_model=ForecastResponse,
             summary="Positivity-rate forecast over supplied tested/positive series")
@handle_exceptions
async def positivity_forecast(req: ForecastRequest) -> ForecastResponse:
    config = to_config(req)
    tested = [DatedCount(date=p.date, count=p.count) for p in req.tested]
    positive = [DatedCount(date=p.date, count=p.count) for p in req.positive]
    return await run_forecast(tested, positive, config)


@router.post("/forecast/positivity/mhlw", response_model=ForecastResponse,
             summary="Positivity-rate forecast over the MHLW daily PCR series")
@handle_exceptions
async def mhlw_positivity_forecast(req: MhlwForecastRequest) -> ForecastResponse:
    config = to_config(req)
    return await run_source_forecast(get_provider(), config, refresh=req.refresh)
