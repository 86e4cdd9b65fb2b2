"""
Data model shared by the pipeline stages: raw dated counts, aligned
observations, smoothed rates, forecast output and the run configuration.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any, List, Optional

from engine.errors import InvalidConfidenceLevel, InvalidForecastConfig


@dataclass(frozen=True)
class DatedCount:
    date: date
    count: int


@dataclass(frozen=True)
class AlignedObservation:
    date: date
    tested: float
    positive: float


@dataclass(frozen=True)
class RateObservation:
    date: date
    positive_rate: float


@dataclass(frozen=True)
class ForecastResult:
    forecasted_rates: List[float]
    lower_bound: List[float]
    upper_bound: List[float]

    def __len__(self) -> int:
        return len(self.forecasted_rates)


@dataclass(frozen=True)
class ForecastPoint:
    date: date
    rate: float


@dataclass(frozen=True)
class PositivityForecast:
    actual: List[RateObservation]
    result: ForecastResult
    forecast: List[ForecastPoint] = field(default_factory=list)

    @property
    def last_actual_date(self) -> date:
        return self.actual[-1].date


@dataclass(frozen=True)
class ForecastConfig:
    moving_average_window: int = 7
    ssa_window_size: int = 14
    ssa_series_length: int = 30
    horizon: int = 90
    confidence_level: float = 0.95
    ssa_train_size: Optional[int] = None
    ssa_rank: Optional[int] = None
    ssa_energy_threshold: float = 0.99
    ssa_stabilize: bool = True
    ssa_max_rank: Optional[int] = None

    @classmethod
    def from_settings(cls, settings: Any = None, **overrides: Any) -> ForecastConfig:
        if settings is None:
            from config import settings

        base = cls(
            moving_average_window=settings.moving_average_window,
            ssa_window_size=settings.ssa_window_size,
            ssa_series_length=settings.ssa_series_length,
            horizon=settings.horizon,
            confidence_level=settings.confidence_level,
            ssa_train_size=settings.ssa_train_size,
            ssa_rank=settings.ssa_rank,
            ssa_energy_threshold=settings.ssa_energy_threshold,
            ssa_stabilize=settings.ssa_stabilize,
            ssa_max_rank=settings.ssa_max_rank,
        )
        return replace(base, **{k: v for k, v in overrides.items() if v is not None})

    def validate(self) -> None:
        # confidence level first: a bad level must fail before any computation
        if not 0.0 < self.confidence_level < 1.0:
            raise InvalidConfidenceLevel(self.confidence_level)
        if self.moving_average_window < 1:
            raise InvalidForecastConfig(f"moving_average_window must be >= 1, got {self.moving_average_window}")
        if self.ssa_window_size < 2:
            raise InvalidForecastConfig(f"ssa_window_size must be >= 2, got {self.ssa_window_size}")
        if self.ssa_series_length <= self.ssa_window_size:
            raise InvalidForecastConfig(
                f"ssa_series_length ({self.ssa_series_length}) must exceed "
                f"ssa_window_size ({self.ssa_window_size})"
            )
        if self.horizon < 1:
            raise InvalidForecastConfig(f"horizon must be >= 1, got {self.horizon}")
        if not 0.0 < self.ssa_energy_threshold <= 1.0:
            raise InvalidForecastConfig(f"ssa_energy_threshold must be in (0, 1], got {self.ssa_energy_threshold}")
        if self.ssa_rank is not None and self.ssa_rank < 1:
            raise InvalidForecastConfig(f"ssa_rank must be >= 1, got {self.ssa_rank}")
        if self.ssa_max_rank is not None and self.ssa_max_rank < 1:
            raise InvalidForecastConfig(f"ssa_max_rank must be >= 1, got {self.ssa_max_rank}")
