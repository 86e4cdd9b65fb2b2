"""
Forecasting stages: the adaptive SSA model and the non-negative clamp applied
to its point forecasts.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""


from engine.forecast.ssa import SSAForecaster
from engine.forecast.clamp import clamp_forecast, relu

__all__ = ["SSAForecaster", "clamp_forecast", "relu"]
