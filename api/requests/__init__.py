from __future__ import annotations

import datetime as dt
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field


class DatedCountIn(BaseModel):
    date: dt.date
    count: int = Field(ge=0)


class ForecastOverrides(BaseModel):
    moving_average_window: Optional[int] = Field(default=None, ge=1, le=365)
    ssa_window_size: Optional[int] = Field(default=None, ge=2, le=365)
    ssa_series_length: Optional[int] = Field(default=None, ge=3, le=3650)
    ssa_train_size: Optional[int] = Field(default=None, ge=1)
    ssa_rank: Optional[int] = Field(default=None, ge=1)
    ssa_max_rank: Optional[int] = Field(default=None, ge=1)
    ssa_energy_threshold: Optional[float] = Field(default=None, gt=0, le=1)
    ssa_stabilize: Optional[bool] = None
    horizon: Optional[int] = Field(default=None, ge=1, le=3650)
    # range checked by the engine so the error carries its own taxonomy
    confidence_level: Optional[float] = None

    def overrides(self) -> Dict[str, Any]:
        return self.model_dump(include=set(ForecastOverrides.model_fields), exclude_none=True)


class ForecastRequest(ForecastOverrides):
    tested: List[DatedCountIn] = Field(min_length=1)
    positive: List[DatedCountIn] = Field(min_length=1)


class MhlwForecastRequest(ForecastOverrides):
    refresh: bool = False
