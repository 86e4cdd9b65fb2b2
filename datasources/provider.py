"""
Provider bundling the tested and positive count sources.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import asyncio
from pathlib import Path
from typing import Dict, List, Tuple

from engine.models import DatedCount
from .base import CountSource
from .csv_source import CsvCountSource
from .data_config import DataSourceSettings


class DataSourceProvider:
    def __init__(self, settings: DataSourceSettings):
        self.settings = settings
        data_dir = Path(settings.data_dir)
        self.tested: CountSource = CsvCountSource(
            "tested",
            settings.tested_url,
            data_dir / settings.tested_filename,
            timeout=settings.source_timeout,
            attempts=settings.source_retry_attempts,
            delay=settings.source_retry_delay,
        )
        self.positive: CountSource = CsvCountSource(
            "positive",
            settings.positive_url,
            data_dir / settings.positive_filename,
            timeout=settings.source_timeout,
            attempts=settings.source_retry_attempts,
            delay=settings.source_retry_delay,
        )

    async def load_counts(self, refresh: bool = False) -> Tuple[List[DatedCount], List[DatedCount]]:
        tested, positive = await asyncio.gather(
            self.tested.load(refresh=refresh),
            self.positive.load(refresh=refresh),
        )
        return tested, positive

    def cache_status(self) -> Dict[str, bool]:
        return {"tested": self.tested.is_cached, "positive": self.positive.is_cached}
