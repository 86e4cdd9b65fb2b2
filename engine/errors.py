"""
Error taxonomy for the alignment, smoothing and forecasting engine. Every
failure is a deterministic function of input size or configuration, so none
of these are retried.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations


class ForecastError(Exception):
    pass


class EmptyResult(ForecastError):
    pass


class InsufficientData(ForecastError):
    def __init__(self, required: int, actual: int, what: str = "observations") -> None:
        self.required = required
        self.actual = actual
        super().__init__(f"need at least {required} {what}, got {actual}")


class InsufficientHistory(InsufficientData):
    pass


class InvalidConfidenceLevel(ForecastError):
    def __init__(self, level: float) -> None:
        self.level = level
        super().__init__(f"confidence level must be in (0, 1), got {level!r}")


class InvalidForecastConfig(ForecastError):
    pass


class SeriesLengthMismatch(ForecastError):
    pass
