"""Input validation for simulation parameters."""

from __future__ import annotations

import math
import numbers
from dataclasses import dataclass, field

MAX_YEARS = 60
MAX_SIMULATIONS = 1_000_000


@dataclass
class ValidationResult:
    """Result of validation containing any errors found."""

    errors: list[tuple[str, str]] = field(default_factory=list)

    def add_error(self, field_name: str, message: str) -> None:
        """Add a validation error."""
        self.errors.append((field_name, message))

    def is_valid(self) -> bool:
        """Return True if no validation errors."""
        return len(self.errors) == 0

    def error_messages(self) -> list[str]:
        """Return formatted error messages."""
        return [f"{field_name}: {message}" for field_name, message in self.errors]


def _is_number(value: float) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool) and math.isfinite(value)


def validate_monthly_amount(monthly_amount: float) -> ValidationResult:
    """Validate the monthly surplus."""
    result = ValidationResult()

    if not _is_number(monthly_amount):
        result.add_error("monthly_amount", "Must be a finite number")
    elif monthly_amount < 0:
        result.add_error("monthly_amount", "Cannot be negative")

    return result


def validate_mortgage_rate(mortgage_rate: float) -> ValidationResult:
    """Validate the annual mortgage rate (decimal fraction)."""
    result = ValidationResult()

    if not _is_number(mortgage_rate):
        result.add_error("mortgage_rate", "Must be a finite number")
    elif mortgage_rate < 0:
        result.add_error("mortgage_rate", "Cannot be negative")

    return result


def validate_allocation(allocation: float) -> ValidationResult:
    """Validate the stock allocation fraction."""
    result = ValidationResult()

    if not _is_number(allocation):
        result.add_error("allocation", "Must be a finite number")
    elif allocation < 0 or allocation > 1:
        result.add_error("allocation", "Must be between 0 and 1")

    return result


def validate_horizon(years: int, n_simulations: int) -> ValidationResult:
    """Validate time horizon and trial count."""
    result = ValidationResult()

    if not isinstance(years, numbers.Integral) or isinstance(years, bool):
        result.add_error("years", "Must be a whole number of years")
    elif years < 1:
        result.add_error("years", "Must simulate at least 1 year")
    elif years > MAX_YEARS:
        result.add_error("years", f"Cannot simulate more than {MAX_YEARS} years")

    if not isinstance(n_simulations, numbers.Integral) or isinstance(n_simulations, bool):
        result.add_error("n_simulations", "Must be a whole number")
    elif n_simulations < 1:
        result.add_error("n_simulations", "Must run at least 1 simulation")
    elif n_simulations > MAX_SIMULATIONS:
        result.add_error(
            "n_simulations", f"Cannot run more than {MAX_SIMULATIONS:,} simulations"
        )

    return result


def validate_simulation_params(
    monthly_amount: float,
    years: int,
    mortgage_rate: float,
    allocation: float,
    n_simulations: int,
) -> ValidationResult:
    """Run all validations and combine results."""
    combined = ValidationResult()

    validations = [
        validate_monthly_amount(monthly_amount),
        validate_horizon(years, n_simulations),
        validate_mortgage_rate(mortgage_rate),
        validate_allocation(allocation),
    ]

    for result in validations:
        combined.errors.extend(result.errors)

    return combined
