"""Capital gains tax calculations for the stock scenario."""

from __future__ import annotations

from paydown.tax_config import (
    CURRENT_TAX_CONFIG,
    NORWEGIAN_CAPITAL_GAINS_RATE,
    CapitalGainsTaxConfig,
)


def capital_gains(total_value: float, cost_basis: float) -> float:
    """Realized gain on liquidation; losses count as zero."""
    return max(0.0, total_value - cost_basis)


def calculate_capital_gains_tax(
    total_value: float,
    cost_basis: float,
    rate: float = NORWEGIAN_CAPITAL_GAINS_RATE,
) -> float:
    """
    Calculate tax on stock capital gains at a flat effective rate.

    Args:
        total_value: Final portfolio value
        cost_basis: Total amount invested
        rate: Effective tax rate on gains (default 37.84%)

    Returns:
        Tax owed
    """
    return capital_gains(total_value, cost_basis) * rate


def calculate_capital_gains_tax_step_up(
    total_value: float,
    cost_basis: float,
    config: CapitalGainsTaxConfig = CURRENT_TAX_CONFIG,
) -> float:
    """
    Calculate tax using the step-up method.

    Gains x 1.72 x 22% gives the same result as the direct 37.84% rate.
    """
    stepped_up = capital_gains(total_value, cost_basis) * config.step_up_factor
    return stepped_up * config.flat_rate


def calculate_after_tax_value(
    total_value: float,
    cost_basis: float,
    rate: float = NORWEGIAN_CAPITAL_GAINS_RATE,
) -> float:
    """Portfolio value after paying capital gains tax on liquidation."""
    return total_value - calculate_capital_gains_tax(total_value, cost_basis, rate)


def calculate_effective_tax_rate(
    total_value: float,
    cost_basis: float,
    rate: float = NORWEGIAN_CAPITAL_GAINS_RATE,
) -> float:
    """Tax paid as a fraction of gains (0 when there is no gain)."""
    gains = capital_gains(total_value, cost_basis)
    if gains == 0:
        return 0.0
    return calculate_capital_gains_tax(total_value, cost_basis, rate) / gains


def calculate_shielding(
    cost_basis: float,
    years: int,
    risk_free_rate: float | None = None,
) -> float:
    """
    Approximate shielding deduction for an account held ``years`` years.

    Simplified: assumes a constant cost basis. The valuators do not apply
    shielding; this is reported for information only.
    """
    if risk_free_rate is None:
        risk_free_rate = CURRENT_TAX_CONFIG.risk_free_rate
    return cost_basis * risk_free_rate * years
