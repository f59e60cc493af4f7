"""Shared pytest fixtures for paydown simulator tests."""

import numpy as np
import pytest

from paydown.returns import HistoricalReturns, load_historical_returns
from paydown.simulator import MonteCarloEngine, SimulationParams


@pytest.fixture
def small_dataset() -> HistoricalReturns:
    """Five years of hand-picked returns."""
    return HistoricalReturns(
        years=np.array([2019, 2020, 2021, 2022, 2023]),
        returns=np.array([0.10, -0.20, 0.30, 0.05, 0.0]),
        mean_return=0.05,
        std_deviation=0.1871,
    )


@pytest.fixture
def single_year_dataset() -> HistoricalReturns:
    """Dataset with a single 10% observation (every path is identical)."""
    return HistoricalReturns(
        years=np.array([2000]),
        returns=np.array([0.10]),
        mean_return=0.10,
        std_deviation=0.0,
    )


@pytest.fixture
def bundled_dataset() -> HistoricalReturns:
    """The Nordic index dataset shipped with the package."""
    return load_historical_returns()


@pytest.fixture
def default_params() -> SimulationParams:
    """Standard inputs: 10,000 NOK/month, 10 years, 4.5%, 50% stocks."""
    return SimulationParams(
        monthly_amount=10_000.0,
        years=10,
        mortgage_rate=0.045,
        allocation=0.5,
        n_simulations=500,
    )


@pytest.fixture
def engine(small_dataset) -> MonteCarloEngine:
    """Engine bound to the small dataset."""
    return MonteCarloEngine(small_dataset)


@pytest.fixture
def payload() -> dict:
    """Dataset payload in the on-disk JSON schema."""
    return {
        "annual_returns": [
            {"year": 2020, "return": 0.10},
            {"year": 2021, "return": -0.05},
            {"year": 2022, "return": 0.20},
        ],
        "statistics": {"mean_return": 0.0833, "std_deviation": 0.1258},
    }