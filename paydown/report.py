"""Display-ready summaries derived from one simulation run."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field

import numpy as np

from paydown.helpers import Percentiles
from paydown.histogram import HistogramBin, bin_data
from paydown.simulator import SimulationResult
from paydown.statistics import (
    StatisticsSummary,
    calculate_percentiles,
    outperformance_probability,
    summarize,
    tie_fraction,
)
from paydown.time_series import PercentileBand, compute_time_series_bands

logger = logging.getLogger(__name__)


@dataclass
class ScenarioReport:
    """Outcomes and summaries for one scenario."""

    data: np.ndarray
    stats: StatisticsSummary | None
    percentiles: Percentiles | None
    histogram: list[HistogramBin]


@dataclass(frozen=True)
class Comparison:
    """
    Head-to-head comparison of the paired outcomes.

    probability_mortgage_wins is the complement of probability_stock_wins,
    so tied trials are credited to the mortgage side.
    """

    probability_stock_wins: float
    probability_mortgage_wins: float
    tie_fraction: float
    median_difference: float


@dataclass
class SimulationReport:
    """Everything a visualization layer needs from one run."""

    stock: ScenarioReport
    mortgage: ScenarioReport
    comparison: Comparison
    time_series: list[PercentileBand] = field(default_factory=list)


def _scenario_report(data: np.ndarray, n_bins: int | None) -> ScenarioReport:
    return ScenarioReport(
        data=data,
        stats=summarize(data),
        percentiles=calculate_percentiles(data),
        histogram=bin_data(data, n_bins),
    )


def compare_outcomes(stock: np.ndarray, mortgage: np.ndarray) -> Comparison:
    """Compare index-aligned stock and mortgage outcomes."""
    p_stock = outperformance_probability(stock, mortgage)
    stock_pct = calculate_percentiles(stock)
    mortgage_pct = calculate_percentiles(mortgage)
    if stock_pct is None or mortgage_pct is None:
        median_difference = 0.0
    else:
        median_difference = stock_pct.p50 - mortgage_pct.p50

    return Comparison(
        probability_stock_wins=p_stock,
        probability_mortgage_wins=1 - p_stock,
        tie_fraction=tie_fraction(stock, mortgage),
        median_difference=median_difference,
    )


def build_report(result: SimulationResult, n_bins: int | None = None) -> SimulationReport:
    """
    Derive statistics, histograms, comparison and fan-chart bands.

    Args:
        result: Output of MonteCarloEngine.run
        n_bins: Fixed histogram bin count (default: Freedman-Diaconis)

    Returns:
        SimulationReport; time_series is empty unless the run collected
        yearly paths
    """
    start = time.perf_counter()

    stock = _scenario_report(result.stock, n_bins)
    mortgage = _scenario_report(result.mortgage, n_bins)
    logger.debug(
        f"Histograms: {len(stock.histogram)} stock bins, "
        f"{len(mortgage.histogram)} mortgage bins"
    )

    comparison = compare_outcomes(result.stock, result.mortgage)

    bands: list[PercentileBand] = []
    if result.time_series is not None:
        bands = compute_time_series_bands(
            result.time_series.stock_paths,
            result.params.years,
            result.time_series.mortgage_path,
        )
        logger.debug(f"Computed {len(bands)} time series bands")

    logger.info(f"Report built in {time.perf_counter() - start:.3f}s")

    return SimulationReport(
        stock=stock,
        mortgage=mortgage,
        comparison=comparison,
        time_series=bands,
    )
