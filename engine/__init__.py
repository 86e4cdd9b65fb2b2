"""
Engine packages for the PCR positivity forecast: series preparation, SSA
forecasting and the pipeline tying them together.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.errors import (
    EmptyResult,
    ForecastError,
    InsufficientData,
    InsufficientHistory,
    InvalidConfidenceLevel,
    InvalidForecastConfig,
    SeriesLengthMismatch,
)
from engine.models import (
    AlignedObservation,
    DatedCount,
    ForecastConfig,
    ForecastPoint,
    ForecastResult,
    PositivityForecast,
    RateObservation,
)

__all__ = [
    "EmptyResult",
    "ForecastError",
    "InsufficientData",
    "InsufficientHistory",
    "InvalidConfidenceLevel",
    "InvalidForecastConfig",
    "SeriesLengthMismatch",
    "AlignedObservation",
    "DatedCount",
    "ForecastConfig",
    "ForecastPoint",
    "ForecastResult",
    "PositivityForecast",
    "RateObservation",
]
