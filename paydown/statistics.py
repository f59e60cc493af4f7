"""Summary statistics over simulation outcome collections.

Percentiles use the nearest-rank convention: the value at index
``floor(n * p)`` of the sorted data, clamped to the last element. No
interpolation is done, so every percentile is an observed outcome.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from paydown.exceptions import LengthMismatchError
from paydown.helpers import Percentiles

PERCENTILE_LEVELS = (0.05, 0.25, 0.50, 0.75, 0.95)


@dataclass(frozen=True)
class StatisticsSummary:
    """Distribution summary for one outcome collection."""

    count: int
    mean: float
    median: float
    std_dev: float
    min: float
    max: float
    p5: float
    p25: float
    p75: float
    p95: float


def percentile_index(n: int, p: float) -> int:
    """Nearest-rank index into a sorted collection of length ``n``."""
    return min(int(math.floor(n * p)), n - 1)


def percentile(sorted_values: Sequence[float], p: float) -> float:
    """
    Value at percentile ``p`` (0-1) of pre-sorted data.

    Returns 0.0 for empty input.
    """
    n = len(sorted_values)
    if n == 0:
        return 0.0
    return float(sorted_values[percentile_index(n, p)])


def calculate_percentiles(values: Sequence[float]) -> Percentiles | None:
    """Nearest-rank p5/p25/p50/p75/p95 of unsorted data (None when empty)."""
    if len(values) == 0:
        return None
    ordered = np.sort(np.asarray(values, dtype=float))
    p5, p25, p50, p75, p95 = (percentile(ordered, p) for p in PERCENTILE_LEVELS)
    return Percentiles(p5=p5, p25=p25, p50=p50, p75=p75, p95=p95)


def mean(values: Sequence[float]) -> float:
    if len(values) == 0:
        return 0.0
    return float(np.mean(values))


def variance(values: Sequence[float]) -> float:
    """Population variance (divides by N)."""
    if len(values) == 0:
        return 0.0
    return float(np.var(values, ddof=0))


def std_dev(values: Sequence[float]) -> float:
    """Population standard deviation (divides by N)."""
    if len(values) == 0:
        return 0.0
    return float(np.std(values, ddof=0))


def min_max(values: Sequence[float]) -> tuple[float, float]:
    if len(values) == 0:
        return 0.0, 0.0
    arr = np.asarray(values, dtype=float)
    return float(arr.min()), float(arr.max())


def _paired(a: Sequence[float], b: Sequence[float]) -> tuple[np.ndarray, np.ndarray]:
    if len(a) != len(b):
        raise LengthMismatchError(len(a), len(b))
    return np.asarray(a, dtype=float), np.asarray(b, dtype=float)


def outperformance_probability(a: Sequence[float], b: Sequence[float]) -> float:
    """
    Fraction of paired trials where ``a[i]`` strictly exceeds ``b[i]``.

    Both collections must come from the same run so index ``i`` refers to
    the same trial. Ties count for neither side. Returns 0.0 for empty input.

    Raises:
        LengthMismatchError: If the collections differ in length
    """
    left, right = _paired(a, b)
    if len(left) == 0:
        return 0.0
    return float(np.count_nonzero(left > right) / len(left))


def tie_fraction(a: Sequence[float], b: Sequence[float]) -> float:
    """Fraction of paired trials where both outcomes are equal."""
    left, right = _paired(a, b)
    if len(left) == 0:
        return 0.0
    return float(np.count_nonzero(left == right) / len(left))


def summarize(values: Sequence[float]) -> StatisticsSummary | None:
    """
    Calculate comprehensive statistics for one outcome collection.

    Returns:
        StatisticsSummary, or None when there is no data yet
    """
    if values is None or len(values) == 0:
        return None

    ordered = np.sort(np.asarray(values, dtype=float))

    return StatisticsSummary(
        count=len(ordered),
        mean=mean(ordered),
        median=percentile(ordered, 0.50),
        std_dev=std_dev(ordered),
        min=float(ordered[0]),
        max=float(ordered[-1]),
        p5=percentile(ordered, 0.05),
        p25=percentile(ordered, 0.25),
        p75=percentile(ordered, 0.75),
        p95=percentile(ordered, 0.95),
    )
