#!/usr/bin/env python3
"""Basic tests for paydown simulator core functionality."""

import sys
from pathlib import Path

import numpy as np

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from paydown.histogram import bin_data
from paydown.returns import load_historical_returns
from paydown.scenarios import mortgage_savings_value, stock_scenario_value
from paydown.simulator import MonteCarloEngine, SimulationParams
from paydown.statistics import outperformance_probability, summarize


def test_mortgage_savings():
    """Test the mortgage savings annuity."""
    print("Testing mortgage savings...")
    assert mortgage_savings_value(10_000, 10, 0.0) == 1_200_000
    expected = 10_000 * ((1.00375) ** 120 - 1) / 0.00375
    assert abs(mortgage_savings_value(10_000, 10, 0.045) - expected) < 1e-6
    print("  ✓ Mortgage savings tests passed")


def test_stock_scenario():
    """Test the stock scenario on a known path."""
    print("Testing stock scenario...")
    value = stock_scenario_value(1000, 1.0, [0.10, 0.0], 0.0, 2)
    assert abs(value - 24_745.92) < 0.01
    print("  ✓ Stock scenario tests passed")


def test_statistics():
    """Test summary statistics."""
    print("Testing statistics...")
    summary = summarize(list(range(1, 101)))
    assert summary.median == 51
    assert summary.p5 == 6
    assert outperformance_probability([1, 2, 3], [1, 2, 3]) == 0.0
    print("  ✓ Statistics tests passed")


def test_simulation():
    """Test simulation against the bundled dataset."""
    print("Testing simulation...")
    dataset = load_historical_returns()
    engine = MonteCarloEngine(dataset)
    params = SimulationParams(n_simulations=200)

    result = engine.run_with_time_series(params, seed=42)

    assert len(result.stock) == len(result.mortgage) == 200
    assert result.time_series.stock_paths.shape == (200, params.years + 1)
    assert np.all(result.time_series.stock_paths[:, 0] == 0)

    bins = bin_data(result.stock)
    assert sum(b.count for b in bins) == 200
    print("  ✓ Simulation tests passed")


def main():
    """Run all tests."""
    print("Running basic tests for paydown simulator...\n")
    try:
        test_mortgage_savings()
        test_stock_scenario()
        test_statistics()
        test_simulation()
        print("\n✅ All tests passed!")
        return 0
    except Exception as e:
        print(f"\n❌ Test failed: {e}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
