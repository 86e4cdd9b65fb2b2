"""
Constants and configuration for the PCR positivity forecast engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import Optional

from pydantic_settings import BaseSettings


# public MHLW daily series; downloaded once and cached under POSCAST_DATA_DIR
MHLW_TESTED_URL: str = os.getenv("POSCAST_TESTED_URL", "https://www.mhlw.go.jp/content/pcr_tested_daily.csv")
MHLW_POSITIVE_URL: str = os.getenv("POSCAST_POSITIVE_URL", "https://www.mhlw.go.jp/content/pcr_positive_daily.csv")
TESTED_FILENAME = "pcr_tested_daily.csv"
POSITIVE_FILENAME = "pcr_positive_daily.csv"

POSCAST_DATA_DIR = os.getenv("POSCAST_DATA_DIR", ".").rstrip("/") or "."
POSCAST_SOURCE_TIMEOUT = int(os.getenv("POSCAST_SOURCE_TIMEOUT", "30"))
POSCAST_SOURCE_RETRY_ATTEMPTS = int(os.getenv("POSCAST_SOURCE_RETRY_ATTEMPTS", "3"))

# labels handed to whatever renders the actual/forecast chart
CHART_TITLE = "COVID-19 positive rate prediction in Japan"
CHART_X_TITLE = "Date"
CHART_Y_TITLE = "Rate(%)"
CHART_ACTUAL_NAME = "Actuality"
CHART_FORECAST_NAME = "Prediction"


class Settings(BaseSettings):
    # smoothing
    moving_average_window: int = 7

    # singular spectrum analysis
    ssa_window_size: int = 14
    ssa_series_length: int = 30
    # None means fit on every available observation
    ssa_train_size: Optional[int] = None
    # fixed number of kept components; None selects by energy share
    ssa_rank: Optional[int] = None
    ssa_energy_threshold: float = 0.99
    ssa_stabilize: bool = True
    # upper bound for energy based selection; None means ssa_window_size // 2
    ssa_max_rank: Optional[int] = None

    # forecast output
    horizon: int = 90
    confidence_level: float = 0.95

    # api server
    host: str = "0.0.0.0"
    port: int = 4322

    model_config = {
        "env_prefix": "POSCAST_",
        "extra": "ignore",
    }


settings = Settings()
