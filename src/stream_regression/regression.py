"""Closed-form ordinary least squares for a single predictor."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

from stream_regression.models import Fit


def fit_line(samples: Iterable[tuple[float, float]]) -> Fit:
    """Fit y = slope * x + intercept through (x, y) samples.

    Degenerate input does not raise: an empty sequence gives NaN for both terms and
    samples sharing a single x value give a non-finite slope.
    """
    n = 0
    sum_x = 0.0
    sum_y = 0.0
    sum_xy = 0.0
    sum_xx = 0.0
    for x, y in samples:
        n += 1
        sum_x += x
        sum_y += y
        sum_xy += x * y
        sum_xx += x * x

    slope = _divide(n * sum_xy - sum_x * sum_y, n * sum_xx - sum_x * sum_x)
    intercept = _divide(sum_y - slope * sum_x, n)
    return Fit(slope=slope, intercept=intercept)


fit = fit_line


def predict(line: Fit, xs: Sequence[float]) -> list[float]:
    return [line.predict(x) for x in xs]


def _divide(numerator: float, denominator: float) -> float:
    """Float division following IEEE-754 for a zero denominator."""
    if denominator != 0:
        return numerator / denominator
    if numerator == 0 or math.isnan(numerator):
        return math.nan
    return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)
