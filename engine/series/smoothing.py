"""
Trailing moving average over a numeric sequence. The output is aligned to the
tail of the input: it is ``window - 1`` shorter and carries no padding.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import List, Sequence

import numpy as np

from engine.errors import InsufficientData, InvalidForecastConfig


def moving_average(values: Sequence[float], window: int) -> List[float]:
    if window < 1:
        raise InvalidForecastConfig(f"moving average window must be >= 1, got {window}")
    arr = np.asarray(values, dtype=float)
    if len(arr) < window:
        raise InsufficientData(window, len(arr), what="points for the moving average")
    if window == 1:
        return arr.tolist()
    return np.lib.stride_tricks.sliding_window_view(arr, window).mean(axis=1).tolist()
