"""Histogram binning for large outcome collections."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

import numpy as np

from paydown.statistics import percentile

logger = logging.getLogger(__name__)

MIN_BINS = 20
MAX_BINS = 60
FALLBACK_BINS = 30


@dataclass(frozen=True)
class HistogramBin:
    """
    One bin of the histogram.

    Bins are half-open ``[range_start, range_end)`` except the last, which
    also contains ``range_end`` (the maximum value).
    """

    range_start: float
    range_end: float
    count: int
    midpoint: float
    percentage: float


def calculate_optimal_bins(sorted_data: Sequence[float]) -> int:
    """
    Calculate the number of bins using the Freedman-Diaconis rule.

    The rule is robust to outliers and works well for skewed distributions:
    bin width = 2 * IQR / n^(1/3), with quartiles taken by nearest rank.

    Args:
        sorted_data: Pre-sorted, non-empty data

    Returns:
        Number of bins, constrained to the 20-60 range
    """
    n = len(sorted_data)
    q1 = percentile(sorted_data, 0.25)
    q3 = percentile(sorted_data, 0.75)
    iqr = q3 - q1

    bin_width = (2 * iqr) / n ** (1 / 3)
    value_range = float(sorted_data[-1]) - float(sorted_data[0])

    if bin_width > 0:
        n_bins = math.ceil(value_range / bin_width)
    else:
        n_bins = FALLBACK_BINS

    return max(MIN_BINS, min(MAX_BINS, n_bins))


def bin_data(data: Sequence[float], n_bins: int | None = None) -> list[HistogramBin]:
    """
    Bin data into equal-width histogram buckets spanning [min, max].

    Args:
        data: Raw simulation outcomes
        n_bins: Number of bins (default: Freedman-Diaconis)

    Returns:
        Bins ordered by range; empty list for empty input
    """
    if data is None or len(data) == 0:
        return []

    sorted_data = np.sort(np.asarray(data, dtype=float))
    total = len(sorted_data)
    low = float(sorted_data[0])
    high = float(sorted_data[-1])

    if low == high:
        return [
            HistogramBin(
                range_start=low,
                range_end=high,
                count=total,
                midpoint=low,
                percentage=100.0,
            )
        ]

    if n_bins is None:
        n_bins = calculate_optimal_bins(sorted_data)
    elif n_bins < 1:
        raise ValueError(f"n_bins must be positive, got {n_bins}")

    bin_width = (high - low) / n_bins
    logger.debug(f"Binning {total} values into {n_bins} bins of width {bin_width:.2f}")

    # Last bin includes the maximum value
    indices = np.floor((sorted_data - low) / bin_width).astype(int)
    indices = np.clip(indices, 0, n_bins - 1)
    counts = np.bincount(indices, minlength=n_bins)

    bins = []
    for i in range(n_bins):
        start = low + i * bin_width
        # Pin the final edge so the bins cover exactly [min, max]
        end = high if i == n_bins - 1 else low + (i + 1) * bin_width
        count = int(counts[i])
        bins.append(
            HistogramBin(
                range_start=start,
                range_end=end,
                count=count,
                midpoint=(start + end) / 2,
                percentage=count / total * 100,
            )
        )

    return bins
