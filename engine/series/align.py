"""
Inner join of the tested and positive daily count series on date.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Iterable, List

from engine.errors import EmptyResult
from engine.models import AlignedObservation, DatedCount

log = logging.getLogger(__name__)


def _index(series: Iterable[DatedCount], name: str) -> Dict[date, int]:
    by_date: Dict[date, int] = {}
    for item in series:
        if item.date in by_date:
            log.warning("%s series repeats %s; keeping the later count", name, item.date.isoformat())
        by_date[item.date] = item.count
    return by_date


def align(tested: Iterable[DatedCount], positive: Iterable[DatedCount]) -> List[AlignedObservation]:
    """Join both series on date, keeping only dates present in both, ascending.

    Raises :class:`EmptyResult` when the two series share no date.
    """
    tested_by_date = _index(tested, "tested")
    positive_by_date = _index(positive, "positive")

    common = sorted(tested_by_date.keys() & positive_by_date.keys())
    if not common:
        raise EmptyResult(
            f"tested ({len(tested_by_date)} dates) and positive ({len(positive_by_date)} dates) "
            "series have no date in common"
        )

    dropped = len(tested_by_date) + len(positive_by_date) - 2 * len(common)
    if dropped:
        log.debug("align: dropped %d unmatched dates", dropped)

    return [
        AlignedObservation(
            date=d,
            tested=float(tested_by_date[d]),
            positive=float(positive_by_date[d]),
        )
        for d in common
    ]
