"""Data quality validation for the historical returns dataset."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from paydown.returns import HistoricalReturns


@dataclass
class DataValidationResult:
    """Result of data validation containing any issues found."""

    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        """Add a critical error."""
        self.errors.append(message)

    def add_warning(self, message: str) -> None:
        """Add a non-critical warning."""
        self.warnings.append(message)

    def is_valid(self) -> bool:
        """Return True if no critical errors."""
        return len(self.errors) == 0

    def has_warnings(self) -> bool:
        """Return True if there are warnings."""
        return len(self.warnings) > 0

    def all_messages(self) -> list[str]:
        """Return all errors and warnings."""
        return self.errors + self.warnings


def validate_returns_data(
    dataset: HistoricalReturns | None,
    min_years: int = 20,
    max_annual_return: float = 1.0,
    stats_tolerance: float = 0.005,
) -> DataValidationResult:
    """
    Validate historical returns data quality.

    Args:
        dataset: Loaded historical returns
        min_years: Minimum years of history recommended
        max_annual_return: Largest plausible single-year move (default 100%)
        stats_tolerance: Allowed gap between stated and recomputed mean/std

    Returns:
        DataValidationResult with errors and warnings
    """
    result = DataValidationResult()

    if dataset is None or len(dataset) == 0:
        result.add_error("Returns data is empty or None")
        return result

    returns = np.asarray(dataset.returns)
    years = np.asarray(dataset.years)

    n_missing = int((~np.isfinite(returns)).sum())
    if n_missing > 0:
        result.add_error(f"{n_missing} non-finite returns")
        return result

    # A return of -100% or worse wipes out the portfolio on any path
    n_ruin = int((returns <= -1.0).sum())
    if n_ruin > 0:
        result.add_error(f"{n_ruin} returns at or below -100%")

    n_years = len(returns)
    if n_years < min_years:
        result.add_warning(
            f"Limited history: {n_years} years (recommended: {min_years}+)"
        )

    extreme = np.abs(returns) > max_annual_return
    if extreme.any():
        result.add_warning(
            f"{int(extreme.sum())} extreme annual returns "
            f"(min: {returns.min():.1%}, max: {returns.max():.1%})"
        )

    if len(np.unique(years)) != n_years:
        result.add_warning("Duplicate years in dataset")
    elif n_years > 1 and not np.all(np.diff(years) > 0):
        result.add_warning("Years are not in ascending order")

    computed_mean = float(returns.mean())
    if abs(computed_mean - dataset.mean_return) > stats_tolerance:
        result.add_warning(
            f"Stated mean {dataset.mean_return:.2%} differs from "
            f"computed mean {computed_mean:.2%}"
        )

    if n_years > 1:
        computed_std = float(returns.std(ddof=1))
        if abs(computed_std - dataset.std_deviation) > stats_tolerance:
            result.add_warning(
                f"Stated std deviation {dataset.std_deviation:.2%} differs from "
                f"computed {computed_std:.2%}"
            )

    return result
