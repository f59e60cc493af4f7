"""CLI entry point: compare investing the monthly surplus with paying down the mortgage."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from paydown.data_validation import validate_returns_data
from paydown.exceptions import DatasetError, ValidationError
from paydown.helpers import format_nok, format_percent
from paydown.report import SimulationReport, build_report
from paydown.returns import DEFAULT_DATA_PATH, load_historical_returns
from paydown.simulator import (
    DEFAULT_N_SIMULATIONS,
    TIME_HORIZON_CHOICES,
    MonteCarloEngine,
    SimulationParams,
)

logger = logging.getLogger("paydown")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="paydown",
        description="Monte Carlo comparison of stock investing versus mortgage paydown",
    )
    parser.add_argument("--monthly", type=float, default=10_000.0, help="Monthly surplus in NOK (default: 10000)")
    parser.add_argument("--years", type=int, choices=TIME_HORIZON_CHOICES, default=10, help="Time horizon in years")
    parser.add_argument("--mortgage-rate", type=float, default=4.5, help="Annual mortgage rate in percent (default: 4.5)")
    parser.add_argument("--allocation", type=float, default=50.0, help="Percent of surplus invested in stocks (default: 50)")
    parser.add_argument("--simulations", type=int, default=DEFAULT_N_SIMULATIONS, help="Number of Monte Carlo trials")
    parser.add_argument("--seed", type=int, help="Random seed for reproducibility")
    parser.add_argument("--data", type=Path, default=DEFAULT_DATA_PATH, help="Historical returns JSON file")
    parser.add_argument("--bins", type=int, help="Fixed histogram bin count (default: Freedman-Diaconis)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _print_summary(report: SimulationReport, seed: int | None) -> None:
    for name, scenario in (("Stocks", report.stock), ("Mortgage", report.mortgage)):
        stats = scenario.stats
        if stats is None:
            continue
        print(
            f"{name:<9} median {format_nok(stats.median)}  "
            f"(p5 {format_nok(stats.p5)}, p95 {format_nok(stats.p95)})"
        )

    comparison = report.comparison
    print(f"Stocks win in {format_percent(comparison.probability_stock_wins)} of simulations")
    print(f"Median difference: {format_nok(comparison.median_difference)}")

    if report.time_series:
        last = report.time_series[-1]
        print(
            f"Year {last.year} pre-tax stock portfolio: median {format_nok(last.p50, compact=True)}"
        )
    if seed is not None:
        print(f"Seed: {seed}")


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        dataset = load_historical_returns(args.data)
    except DatasetError as exc:
        print(f"Failed to load returns: {exc}", file=sys.stderr)
        return 2

    quality = validate_returns_data(dataset)
    for warning in quality.warnings:
        logger.warning(f"Returns data: {warning}")
    if not quality.is_valid():
        for error in quality.errors:
            print(f"ERROR: {error}", file=sys.stderr)
        return 2

    params = SimulationParams.from_percent_inputs(
        monthly_amount=args.monthly,
        years=args.years,
        mortgage_rate_percent=args.mortgage_rate,
        allocation_percent=args.allocation,
        n_simulations=args.simulations,
    )

    engine = MonteCarloEngine(dataset)
    try:
        result = engine.run_with_time_series(params, seed=args.seed)
        report = build_report(result, n_bins=args.bins)
    except ValidationError as exc:
        print(f"Invalid parameters: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Invalid option: {exc}", file=sys.stderr)
        return 1

    _print_summary(report, result.seed)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
