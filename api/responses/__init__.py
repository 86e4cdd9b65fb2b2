"""
Response models for API endpoints.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Optional
import numpy as np
from pydantic import BaseModel, Field, model_serializer

from config import (
    CHART_ACTUAL_NAME,
    CHART_FORECAST_NAME,
    CHART_TITLE,
    CHART_X_TITLE,
    CHART_Y_TITLE,
)


def _coerce(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _coerce(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_coerce(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    return obj


class NpModel(BaseModel):

    @model_serializer(mode="wrap")
    def _serialize(self, handler: Any) -> Any:
        return _coerce(handler(self))


class RatePoint(NpModel):

    date: dt.date
    rate: float


class ChartSpec(NpModel):

    title: str = CHART_TITLE
    x_title: str = CHART_X_TITLE
    y_title: str = CHART_Y_TITLE
    actual_name: str = CHART_ACTUAL_NAME
    forecast_name: str = CHART_FORECAST_NAME
    mode: str = "lines+markers"


class ForecastResponse(NpModel):

    actual: List[RatePoint]
    forecast: List[RatePoint]
    lower_bound: List[float]
    upper_bound: List[float]
    config: Dict[str, Any] = Field(default_factory=dict)
    chart: ChartSpec = Field(default_factory=ChartSpec)
    source: Optional[str] = None
