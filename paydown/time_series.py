"""Per-year percentile bands for the portfolio value fan chart."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from paydown.statistics import PERCENTILE_LEVELS, percentile_index


@dataclass(frozen=True)
class PercentileBand:
    """Distribution of stock portfolio values across trials at one year."""

    year: int
    p5: float
    p25: float
    p50: float
    p75: float
    p95: float
    mean: float
    mortgage: float | None = None


def compute_time_series_bands(
    paths: np.ndarray,
    years: int,
    mortgage_path: Sequence[float] | None = None,
) -> list[PercentileBand]:
    """
    Compute percentile bands from simulation paths at each year.

    Args:
        paths: Array of shape (n_simulations, years + 1) of yearly values
        years: Time horizon
        mortgage_path: Deterministic mortgage value per year, paired with
            each band when given

    Returns:
        One PercentileBand per year 0..years, year-ascending. Empty when
        there are no paths.
    """
    matrix = np.asarray(paths, dtype=float)
    if matrix.size == 0:
        return []
    if matrix.ndim != 2 or matrix.shape[1] < years + 1:
        raise ValueError(
            f"paths must have shape (n_simulations, {years + 1}), got {matrix.shape}"
        )
    if mortgage_path is not None and len(mortgage_path) < years + 1:
        raise ValueError(
            f"mortgage_path needs {years + 1} values, got {len(mortgage_path)}"
        )

    n_sims = matrix.shape[0]
    # Sort every year's column at once; rows of the result are ranks
    ordered = np.sort(matrix[:, : years + 1], axis=0)
    rows = [percentile_index(n_sims, p) for p in PERCENTILE_LEVELS]
    means = ordered.mean(axis=0)

    bands = []
    for year in range(years + 1):
        p5, p25, p50, p75, p95 = (float(ordered[row, year]) for row in rows)
        bands.append(
            PercentileBand(
                year=year,
                p5=p5,
                p25=p25,
                p50=p50,
                p75=p75,
                p95=p95,
                mean=float(means[year]),
                mortgage=float(mortgage_path[year]) if mortgage_path is not None else None,
            )
        )

    return bands
