"""Monte Carlo simulation engine comparing stock investing with mortgage paydown."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

import numpy as np

from paydown.exceptions import SimulationError, ValidationError
from paydown.helpers import percent_to_fraction
from paydown.returns import HistoricalReturns
from paydown.scenarios import mortgage_path, mortgage_scenario_value, value_stock_scenario
from paydown.validation import ValidationResult, validate_simulation_params

logger = logging.getLogger(__name__)

DEFAULT_N_SIMULATIONS = 10_000
TIME_HORIZON_CHOICES = (5, 10, 15, 20)

# (years, rng) -> annual returns of length ``years``
PathGenerator = Callable[[int, np.random.Generator], np.ndarray]


@dataclass(frozen=True)
class SimulationParams:
    """
    Inputs for one comparison run.

    Attributes:
        monthly_amount: Monthly surplus available (NOK)
        years: Time horizon in years
        mortgage_rate: Annual mortgage rate as a decimal fraction
        allocation: Fraction of the surplus invested in stocks (0-1)
        n_simulations: Number of Monte Carlo trials
    """

    monthly_amount: float = 10_000.0
    years: int = 10
    mortgage_rate: float = 0.045
    allocation: float = 0.5
    n_simulations: int = DEFAULT_N_SIMULATIONS

    @classmethod
    def from_percent_inputs(
        cls,
        monthly_amount: float,
        years: int,
        mortgage_rate_percent: float,
        allocation_percent: float,
        n_simulations: int = DEFAULT_N_SIMULATIONS,
    ) -> "SimulationParams":
        """Create from UI-style inputs where rate and allocation are percentages."""
        return cls(
            monthly_amount=monthly_amount,
            years=years,
            mortgage_rate=percent_to_fraction(mortgage_rate_percent),
            allocation=percent_to_fraction(allocation_percent),
            n_simulations=n_simulations,
        )

    @property
    def monthly_to_stock(self) -> float:
        """Monthly amount invested in stocks."""
        return self.monthly_amount * self.allocation

    @property
    def monthly_to_mortgage(self) -> float:
        """Monthly amount paid into the mortgage in the stock scenario."""
        return self.monthly_amount * (1 - self.allocation)

    def validate(self) -> ValidationResult:
        """Collect every parameter problem."""
        return validate_simulation_params(
            monthly_amount=self.monthly_amount,
            years=self.years,
            mortgage_rate=self.mortgage_rate,
            allocation=self.allocation,
            n_simulations=self.n_simulations,
        )

    def ensure_valid(self) -> None:
        """Raise ValidationError for the first invalid field."""
        result = self.validate()
        if not result.is_valid():
            field_name, message = result.errors[0]
            logger.warning(f"Rejected simulation parameters: {result.error_messages()}")
            raise ValidationError(field_name, message)


@dataclass(frozen=True)
class TrialOutcome:
    """Paired outcome of a single trial."""

    stock: float
    mortgage: float
    yearly_values: np.ndarray | None = None


@dataclass
class TimeSeries:
    """
    Year-by-year values for the fan chart.

    stock_paths holds the pre-tax stock portfolio value, while final stock
    outcomes are after tax, so the last column is not directly comparable
    with SimulationResult.stock.
    """

    stock_paths: np.ndarray  # (n_simulations, years + 1)
    mortgage_path: np.ndarray  # (years + 1,)


@dataclass
class SimulationResult:
    """Results from a Monte Carlo comparison."""

    params: SimulationParams
    stock: np.ndarray
    mortgage: np.ndarray
    time_series: TimeSeries | None = None
    seed: int | None = None

    @property
    def n_simulations(self) -> int:
        """Number of completed trials."""
        return len(self.stock)


def run_trial(
    params: SimulationParams,
    rng: np.random.Generator,
    path_generator: PathGenerator,
    track_yearly: bool = False,
) -> TrialOutcome:
    """
    Run one independent trial.

    Draws a fresh return path, values the stock scenario on it and values
    the (deterministic) mortgage scenario alongside so both outcomes share
    the trial index.
    """
    returns = path_generator(params.years, rng)
    if len(returns) != params.years:
        raise SimulationError(
            f"Return path has {len(returns)} years, expected {params.years}"
        )

    valuation = value_stock_scenario(
        params.monthly_amount,
        params.allocation,
        returns,
        params.mortgage_rate,
        params.years,
        track_yearly=track_yearly,
    )
    mortgage = mortgage_scenario_value(
        params.monthly_amount, params.years, params.mortgage_rate
    )

    return TrialOutcome(
        stock=valuation.final_value,
        mortgage=mortgage,
        yearly_values=valuation.yearly_values,
    )


class MonteCarloEngine:
    """
    Simulation engine bound to one historical returns dataset.

    The engine holds no mutable state: each run derives one independent
    random stream per trial index from a single seed, so outcomes depend
    only on the seed and the trial index, not on execution order.
    """

    def __init__(
        self,
        dataset: HistoricalReturns,
        path_generator: PathGenerator | None = None,
    ) -> None:
        self.dataset = dataset
        self._path_generator = path_generator or dataset.sample_path

    def generate_return_path(self, years: int, rng: np.random.Generator) -> np.ndarray:
        """Bootstrap one annual return path."""
        return self._path_generator(years, rng)

    def run(
        self,
        params: SimulationParams,
        seed: int | None = None,
        with_time_series: bool = False,
    ) -> SimulationResult:
        """
        Run ``params.n_simulations`` independent trials.

        Args:
            params: Simulation inputs (validated before any random draw)
            seed: Seed for reproducible runs (fresh entropy when None)
            with_time_series: Also collect yearly stock paths and the
                deterministic mortgage path

        Returns:
            SimulationResult with index-aligned stock and mortgage outcomes
        """
        params.ensure_valid()

        seed_sequence = np.random.SeedSequence(seed)
        n = params.n_simulations
        logger.info(
            f"Running {n} simulations: {params.years} years, "
            f"{params.allocation:.0%} stocks, mortgage rate {params.mortgage_rate:.2%}"
        )
        start = time.perf_counter()

        stock = np.empty(n)
        mortgage = np.empty(n)
        stock_paths = np.empty((n, params.years + 1)) if with_time_series else None

        for i, child in enumerate(seed_sequence.spawn(n)):
            outcome = run_trial(
                params,
                np.random.default_rng(child),
                self._path_generator,
                track_yearly=with_time_series,
            )
            stock[i] = outcome.stock
            mortgage[i] = outcome.mortgage
            if stock_paths is not None:
                stock_paths[i] = outcome.yearly_values

        if not np.all(np.isfinite(stock)):
            raise SimulationError("Stock scenario produced non-finite outcomes")

        time_series = None
        if stock_paths is not None:
            time_series = TimeSeries(
                stock_paths=stock_paths,
                mortgage_path=mortgage_path(
                    params.monthly_amount, params.years, params.mortgage_rate
                ),
            )

        logger.info(f"Simulation finished in {time.perf_counter() - start:.3f}s")

        return SimulationResult(
            params=params,
            stock=stock,
            mortgage=mortgage,
            time_series=time_series,
            seed=seed if seed is not None else int(seed_sequence.entropy),
        )

    def run_with_time_series(
        self,
        params: SimulationParams,
        seed: int | None = None,
    ) -> SimulationResult:
        """Run the simulation and keep year-by-year values for the fan chart."""
        return self.run(params, seed=seed, with_time_series=True)


def run_simulation(
    dataset: HistoricalReturns,
    params: SimulationParams,
    seed: int | None = None,
    with_time_series: bool = False,
) -> SimulationResult:
    """Convenience wrapper: build an engine for ``dataset`` and run once."""
    return MonteCarloEngine(dataset).run(
        params, seed=seed, with_time_series=with_time_series
    )
