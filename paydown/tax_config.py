"""Capital gains tax configuration for the stock scenario."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CapitalGainsTaxConfig:
    """
    Flat effective capital gains tax for a given tax year.

    Norwegian share income is grossed up by a step-up factor before the
    ordinary flat rate is applied, which yields one effective rate on gains.
    These values are set annually and should be verified against the
    current rules from the tax authority.

    Attributes:
        year: Tax year these settings apply to
        step_up_factor: Multiplier applied to realized gains
        flat_rate: Ordinary income tax rate applied after step-up
        risk_free_rate: Shielding rate used for the shielding deduction
    """

    year: int
    step_up_factor: float = 1.72
    flat_rate: float = 0.22
    risk_free_rate: float = 0.039

    @property
    def effective_rate(self) -> float:
        """Effective tax rate on realized gains."""
        return self.step_up_factor * self.flat_rate


NORWAY_2024 = CapitalGainsTaxConfig(
    year=2024,
    step_up_factor=1.72,
    flat_rate=0.22,
    risk_free_rate=0.039,
)

CURRENT_TAX_CONFIG = NORWAY_2024

# 1.72 * 22% = 37.84%
NORWEGIAN_CAPITAL_GAINS_RATE = 0.3784
