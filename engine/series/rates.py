"""
Positivity-rate composition from smoothed tested and positive counts.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import date
from typing import List, Sequence

from engine.errors import SeriesLengthMismatch
from engine.models import RateObservation


def smoothed_dates(dates: Sequence[date], window: int) -> List[date]:
    # the first window - 1 dates have no full trailing window
    return list(dates[window - 1:])


def compose_rates(
    dates: Sequence[date],
    tested_smoothed: Sequence[float],
    positive_smoothed: Sequence[float],
) -> List[RateObservation]:
    """Percentage of positives per date; a zero tested average reports 0%."""
    if not len(dates) == len(tested_smoothed) == len(positive_smoothed):
        raise SeriesLengthMismatch(
            f"dates={len(dates)} tested={len(tested_smoothed)} positive={len(positive_smoothed)}"
        )

    rates: List[RateObservation] = []
    for i in range(len(dates)):
        tested = tested_smoothed[i]
        rate = positive_smoothed[i] / tested * 100.0 if tested > 0 else 0.0
        rates.append(RateObservation(date=dates[i], positive_rate=float(rate)))
    return rates
