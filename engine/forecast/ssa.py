"""
Adaptive Singular Spectrum Analysis forecaster. The most recent
``series_length`` observations are embedded into an ``L x K`` trajectory
matrix, decomposed by SVD, and the leading components define a linear
recurrence (LRF) that is extrapolated recursively. The recurrence is
re-derived as each training observation enters the rolling buffer, and the
one-step innovations collected along the way give the noise variance behind
the confidence bounds.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import List, Optional, Sequence

import numpy as np
from scipy import stats
from scipy.linalg import svd

from engine.errors import (
    ForecastError,
    InsufficientHistory,
    InvalidConfidenceLevel,
    InvalidForecastConfig,
)
from engine.models import ForecastResult

log = logging.getLogger(__name__)

# 1 - nu^2 below this makes the recurrence numerically meaningless
_VERTICALITY_EPS = 1e-9


@dataclass(frozen=True)
class _Subspace:
    rank: int
    coefficients: np.ndarray
    reconstruction: np.ndarray

    def predict_next(self) -> float:
        lags = len(self.coefficients)
        return float(np.dot(self.coefficients, self.reconstruction[-lags:]))

    def in_sample_residuals(self, values: np.ndarray) -> np.ndarray:
        lags = len(self.coefficients)
        return np.array([
            values[t] - np.dot(self.coefficients, values[t - lags:t])
            for t in range(lags, len(values))
        ])


def _trajectory(values: np.ndarray, window: int) -> np.ndarray:
    return np.lib.stride_tricks.sliding_window_view(values, window).T.copy()


def _diagonal_average(matrix: np.ndarray) -> np.ndarray:
    L, K = matrix.shape
    result = np.zeros(L + K - 1)
    counts = np.zeros(L + K - 1)
    for i in range(L):
        result[i:i + K] += matrix[i]
        counts[i:i + K] += 1
    return result / counts


def _select_rank(
    singular_values: np.ndarray,
    energy_threshold: float,
    fixed_rank: Optional[int],
    cap: int,
    max_rank: int,
) -> int:
    if fixed_rank is not None:
        return max(1, min(fixed_rank, cap))
    energy = singular_values ** 2
    total = float(np.sum(energy))
    if total <= 0:
        return 1
    share = np.cumsum(energy) / total
    rank = int(np.searchsorted(share, energy_threshold - 1e-12)) + 1
    # energy selection never keeps more than max_rank components
    return max(1, min(rank, max_rank, cap))


def _recurrence(u: np.ndarray) -> Optional[np.ndarray]:
    pi = u[-1, :]
    nu2 = float(np.dot(pi, pi))
    if 1.0 - nu2 < _VERTICALITY_EPS:
        return None
    return (u[:-1, :] @ pi) / (1.0 - nu2)


def _stabilize(coefficients: np.ndarray) -> np.ndarray:
    # characteristic polynomial z^(L-1) - a_{L-1} z^(L-2) - ... - a_1
    poly = np.concatenate(([1.0], -coefficients[::-1]))
    roots = np.roots(poly)
    magnitudes = np.abs(roots)
    outside = magnitudes > 1.0
    if not outside.any():
        return coefficients
    roots[outside] = roots[outside] / magnitudes[outside]
    return -np.real(np.poly(roots))[1:][::-1]


def _impulse_response(coefficients: np.ndarray, horizon: int) -> np.ndarray:
    by_lag = coefficients[::-1]
    psi = np.zeros(horizon)
    psi[0] = 1.0
    for j in range(1, horizon):
        k = min(j, len(by_lag))
        psi[j] = np.dot(by_lag[:k], psi[j - 1::-1][:k])
    return psi


class SSAForecaster:
    """Fit an adaptive SSA recurrence to a rate series and extrapolate it.

    Parameters mirror the forecasting configuration: ``window_size`` is the
    embedding length L, ``series_length`` the size of the rolling buffer the
    model state is derived from, ``train_size`` how many trailing observations
    the adaptive pass walks over (all of them when ``None``). ``max_rank``
    bounds energy-based rank selection and defaults to ``window_size // 2``.
    """

    def __init__(
        self,
        window_size: int,
        series_length: int,
        confidence_level: float,
        train_size: Optional[int] = None,
        rank: Optional[int] = None,
        energy_threshold: float = 0.99,
        stabilize: bool = True,
        max_rank: Optional[int] = None,
    ) -> None:
        if not 0.0 < confidence_level < 1.0:
            raise InvalidConfidenceLevel(confidence_level)
        if window_size < 2:
            raise InvalidForecastConfig(f"window_size must be >= 2, got {window_size}")
        if series_length <= window_size:
            raise InvalidForecastConfig(
                f"series_length ({series_length}) must exceed window_size ({window_size})"
            )
        if max_rank is not None and max_rank < 1:
            raise InvalidForecastConfig(f"max_rank must be >= 1, got {max_rank}")
        self.window_size = window_size
        self.series_length = series_length
        self.confidence_level = confidence_level
        self.train_size = train_size
        self.rank = rank
        self.energy_threshold = energy_threshold
        self.stabilize = stabilize
        self.max_rank = max_rank if max_rank is not None else max(1, window_size // 2)

        self._model: Optional[_Subspace] = None
        self.noise_variance: float = 0.0
        self.innovations: List[float] = []

    @property
    def fitted_rank(self) -> int:
        return self._require_model().rank

    @property
    def coefficients(self) -> np.ndarray:
        return self._require_model().coefficients.copy()

    def _require_model(self) -> _Subspace:
        if self._model is None:
            raise ForecastError("forecaster has not been fitted")
        return self._model

    def _decompose(self, values: np.ndarray) -> _Subspace:
        trajectory = _trajectory(values, self.window_size)
        u, s, vt = svd(trajectory, full_matrices=False)
        cap = min(self.window_size - 1, len(s))
        rank = _select_rank(s, self.energy_threshold, self.rank, cap, self.max_rank)

        coefficients = None
        while rank >= 1:
            coefficients = _recurrence(u[:, :rank])
            if coefficients is not None:
                break
            rank -= 1
        if coefficients is None:
            # degenerate subspace; carry the last value forward
            rank = 1
            coefficients = np.zeros(self.window_size - 1)
            coefficients[-1] = 1.0

        if self.stabilize:
            coefficients = _stabilize(coefficients)

        reconstruction = _diagonal_average((u[:, :rank] * s[:rank]) @ vt[:rank])
        return _Subspace(rank=rank, coefficients=coefficients, reconstruction=reconstruction)

    def fit(self, values: Sequence[float]) -> SSAForecaster:
        arr = np.asarray(values, dtype=float)
        required = max(self.window_size, self.series_length)
        if len(arr) < required:
            raise InsufficientHistory(required, len(arr), what="rate observations for the SSA model")

        train_size = len(arr) if self.train_size is None else self.train_size
        train_size = max(self.series_length, min(train_size, len(arr)))
        train = arr[-train_size:]

        buffer = deque(train[:self.series_length], maxlen=self.series_length)
        model = self._decompose(np.array(buffer))
        innovations: List[float] = []
        for y in train[self.series_length:]:
            innovations.append(float(y - model.predict_next()))
            buffer.append(y)
            model = self._decompose(np.array(buffer))

        if not innovations:
            innovations = model.in_sample_residuals(np.array(buffer)).tolist()

        self._model = model
        self.innovations = innovations
        self.noise_variance = float(np.mean(np.square(innovations))) if innovations else 0.0
        log.debug(
            "ssa fit: train=%d rank=%d innovations=%d sigma2=%.6g",
            train_size, model.rank, len(innovations), self.noise_variance,
        )
        return self

    def forecast(self, horizon: int) -> ForecastResult:
        if horizon < 1:
            raise InvalidForecastConfig(f"horizon must be >= 1, got {horizon}")
        model = self._require_model()
        lags = len(model.coefficients)

        context = list(model.reconstruction[-lags:])
        predictions: List[float] = []
        for _ in range(horizon):
            nxt = float(np.dot(model.coefficients, context[-lags:]))
            predictions.append(nxt)
            context.append(nxt)

        z = float(stats.norm.ppf(0.5 + self.confidence_level / 2.0))
        psi = _impulse_response(model.coefficients, horizon)
        half_width = z * np.sqrt(self.noise_variance * np.cumsum(psi ** 2))

        return ForecastResult(
            forecasted_rates=predictions,
            lower_bound=[p - w for p, w in zip(predictions, half_width.tolist())],
            upper_bound=[p + w for p, w in zip(predictions, half_width.tolist())],
        )
