"""
Series preparation stages: date alignment of the two count series, trailing
moving-average smoothing and positivity-rate composition.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from engine.series.align import align
from engine.series.smoothing import moving_average
from engine.series.rates import compose_rates, smoothed_dates

__all__ = ["align", "moving_average", "compose_rates", "smoothed_dates"]
