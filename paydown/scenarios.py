"""Scenario valuators for stock investing versus mortgage paydown."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from paydown.taxes import calculate_capital_gains_tax
from paydown.tax_config import NORWEGIAN_CAPITAL_GAINS_RATE


@dataclass(frozen=True)
class StockScenarioValue:
    """
    Breakdown of one stock scenario valuation.

    Attributes:
        final_value: After-tax stock value plus mortgage savings
        stock_value: Pre-tax stock portfolio value at the horizon
        total_contributed: Cost basis of all stock contributions
        tax: Capital gains tax paid on liquidation
        mortgage_savings: Value of the non-stock share paid into the mortgage
        yearly_values: Pre-tax stock value at the end of each year (index 0 = 0),
            only populated when requested
    """

    final_value: float
    stock_value: float
    total_contributed: float
    tax: float
    mortgage_savings: float
    yearly_values: np.ndarray | None = None

    @property
    def after_tax_stock_value(self) -> float:
        """Stock portfolio value after capital gains tax."""
        return self.stock_value - self.tax


def mortgage_savings_value(monthly_payment: float, years: int, annual_rate: float) -> float:
    """
    Future value of extra monthly mortgage payments.

    Each extra payment saves interest that would otherwise compound at the
    mortgage rate, so the savings are valued as an ordinary annuity:
    FV = PMT * ((1 + r)^n - 1) / r with r the monthly rate and n the
    number of months.
    """
    monthly_rate = annual_rate / 12
    total_months = years * 12

    if monthly_rate == 0:
        return monthly_payment * total_months

    return monthly_payment * (((1 + monthly_rate) ** total_months - 1) / monthly_rate)


def mortgage_path(monthly_payment: float, years: int, annual_rate: float) -> np.ndarray:
    """Deterministic mortgage savings value at the end of each year (index 0 = 0)."""
    path = np.zeros(years + 1)
    for year in range(1, years + 1):
        path[year] = mortgage_savings_value(monthly_payment, year, annual_rate)
    return path


def mortgage_scenario_value(monthly_amount: float, years: int, mortgage_rate: float) -> float:
    """Pure paydown scenario: the whole surplus goes to the mortgage."""
    return mortgage_savings_value(monthly_amount, years, mortgage_rate)


def value_stock_scenario(
    monthly_amount: float,
    allocation: float,
    returns: Sequence[float],
    mortgage_rate: float,
    years: int,
    track_yearly: bool = False,
    tax_rate: float = NORWEGIAN_CAPITAL_GAINS_RATE,
) -> StockScenarioValue:
    """
    Value the stocks-plus-partial-paydown scenario for one return path.

    A year's contributions are added at the start of the year, then the
    whole balance earns that year's return. Tax is charged once on
    liquidation at the horizon, so yearly values are pre-tax.

    Args:
        monthly_amount: Monthly surplus
        allocation: Fraction of the surplus invested in stocks (0-1)
        returns: Annual return for each year of the horizon
        mortgage_rate: Annual mortgage rate (e.g. 0.045)
        years: Horizon in years
        track_yearly: Also record the pre-tax stock value after each year
        tax_rate: Effective capital gains rate

    Returns:
        StockScenarioValue with the final value and its components
    """
    monthly_to_stock = monthly_amount * allocation
    monthly_to_mortgage = monthly_amount * (1 - allocation)
    annual_contribution = monthly_to_stock * 12

    stock_value = 0.0
    total_contributed = 0.0
    yearly_values = np.zeros(len(returns) + 1) if track_yearly else None

    for year, annual_return in enumerate(returns):
        stock_value += annual_contribution
        total_contributed += annual_contribution
        stock_value *= 1 + annual_return
        if yearly_values is not None:
            yearly_values[year + 1] = stock_value

    tax = calculate_capital_gains_tax(stock_value, total_contributed, tax_rate)
    savings = mortgage_savings_value(monthly_to_mortgage, years, mortgage_rate)

    return StockScenarioValue(
        final_value=stock_value - tax + savings,
        stock_value=stock_value,
        total_contributed=total_contributed,
        tax=tax,
        mortgage_savings=savings,
        yearly_values=yearly_values,
    )


def stock_scenario_value(
    monthly_amount: float,
    allocation: float,
    returns: Sequence[float],
    mortgage_rate: float,
    years: int,
) -> float:
    """Final value of the stock scenario for one return path."""
    return value_stock_scenario(
        monthly_amount, allocation, returns, mortgage_rate, years
    ).final_value
