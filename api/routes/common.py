"""
Shared utilities for API route modules: the process-wide source provider and
the translation of request overrides into an engine configuration.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Optional

from api.requests import ForecastOverrides
from datasources.data_config import DataSourceSettings
from datasources.provider import DataSourceProvider
from engine.models import ForecastConfig


_provider: Optional[DataSourceProvider] = None


def get_provider() -> DataSourceProvider:
    global _provider
    if _provider is None:
        _provider = DataSourceProvider(settings=DataSourceSettings())
    return _provider


def reset_provider() -> None:
    global _provider
    _provider = None


def to_config(req: ForecastOverrides) -> ForecastConfig:
    return ForecastConfig.from_settings(**req.overrides())
