"""
Floor-at-zero post-processing of forecasted rates. Only the point forecasts
are clamped; the confidence bounds are passed through untouched.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from engine.models import ForecastResult


def relu(value: float) -> float:
    return value if value > 0 else 0.0


def clamp_forecast(result: ForecastResult) -> ForecastResult:
    return ForecastResult(
        forecasted_rates=[relu(v) for v in result.forecasted_rates],
        lower_bound=list(result.lower_bound),
        upper_bound=list(result.upper_bound),
    )
