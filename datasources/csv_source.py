"""
Cached CSV source for the MHLW daily PCR series. The file is downloaded only
when it is missing from the cache directory (or a refresh is requested), then
parsed as ``date, count`` rows with the header row skipped.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import IO, List, Union

import pandas as pd

from datasources.base import CountSource
from datasources.exceptions import DataSourceUnavailable, MalformedSource, QueryTimeout
from datasources.helpers import fetch_bytes, write_atomic
from datasources.retry import retry
from engine.models import DatedCount

log = logging.getLogger(__name__)


def parse_counts(handle: Union[str, Path, IO[str]], name: str = "source") -> List[DatedCount]:
    try:
        frame = pd.read_csv(
            handle,
            header=0,
            usecols=[0, 1],
            names=["date", "count"],
            encoding="utf-8-sig",
            skip_blank_lines=True,
        )
    except (ValueError, pd.errors.ParserError) as exc:
        raise MalformedSource(f"{name}: cannot parse CSV: {exc}") from exc

    frame = frame.dropna(how="all")
    if frame.isna().any().any():
        raise MalformedSource(f"{name}: rows with a missing date or count")

    try:
        dates = pd.to_datetime(frame["date"].astype(str).str.strip())
        counts = pd.to_numeric(frame["count"])
    except (ValueError, TypeError) as exc:
        raise MalformedSource(f"{name}: {exc}") from exc

    if (counts < 0).any():
        raise MalformedSource(f"{name}: negative counts")

    ordered = pd.DataFrame({"date": dates, "count": counts}).sort_values("date", kind="stable")
    return [
        DatedCount(date=ts.date(), count=int(c))
        for ts, c in zip(ordered["date"], ordered["count"])
    ]


class CsvCountSource(CountSource):
    def __init__(
        self,
        name: str,
        url: str,
        cache_path: Union[str, Path],
        timeout: int = 30,
        attempts: int = 3,
        delay: float = 1.0,
    ) -> None:
        super().__init__(name)
        self.url = url
        self.cache_path = Path(cache_path)
        self.timeout = timeout
        self._download = retry(
            attempts=attempts,
            delay=delay,
            exceptions=(DataSourceUnavailable, QueryTimeout),
        )(self._fetch)

    @property
    def is_cached(self) -> bool:
        return self.cache_path.is_file()

    async def _fetch(self) -> bytes:
        return await fetch_bytes(self.url, timeout=self.timeout)

    async def load(self, refresh: bool = False) -> List[DatedCount]:
        if refresh or not self.is_cached:
            log.info("downloading %s from %s", self.name, self.url)
            payload = await self._download()
            await asyncio.to_thread(write_atomic, self.cache_path, payload)
        else:
            log.debug("using cached %s at %s", self.name, self.cache_path)

        counts = await asyncio.to_thread(parse_counts, self.cache_path, self.name)
        log.info("%s: %d daily counts", self.name, len(counts))
        return counts
