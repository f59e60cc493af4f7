"""Historical annual returns dataset and bootstrap path sampling."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from paydown.exceptions import DatasetError, ValidationError

# Configure module logger
logger = logging.getLogger(__name__)

DEFAULT_DATA_PATH = Path(__file__).parent / "data" / "nordic_stock_returns.json"


@dataclass(frozen=True, eq=False)
class HistoricalReturns:
    """
    Ordered annual return observations used as the bootstrap population.

    Every observation is a decimal fraction (0.08 for 8%). The dataset is
    treated as a closed finite population: any year may be drawn, with
    replacement, independently of every other draw.

    Attributes:
        years: Calendar year of each observation
        returns: Annual return of each observation
        mean_return: Precomputed mean annual return
        std_deviation: Precomputed standard deviation of annual returns
    """

    years: np.ndarray
    returns: np.ndarray
    mean_return: float
    std_deviation: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "years", np.array(self.years, dtype=int))
        object.__setattr__(self, "returns", np.array(self.returns, dtype=float))
        if len(self.returns) == 0:
            raise DatasetError("dataset", "No annual return observations")
        if len(self.years) != len(self.returns):
            raise DatasetError(
                "dataset",
                f"{len(self.years)} years but {len(self.returns)} returns",
            )
        # Read-only after load
        self.years.setflags(write=False)
        self.returns.setflags(write=False)

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "HistoricalReturns":
        """
        Build a dataset from a parsed JSON payload.

        Expects ``{"annual_returns": [{"year": ..., "return": ...}, ...],
        "statistics": {"mean_return": ..., "std_deviation": ...}}``. When the
        statistics block is absent the mean and sample standard deviation
        are computed from the observations.
        """
        try:
            entries = payload["annual_returns"]
            years = np.array([int(entry["year"]) for entry in entries], dtype=int)
            returns = np.array([float(entry["return"]) for entry in entries], dtype=float)
        except (KeyError, TypeError, ValueError) as e:
            raise DatasetError("payload", f"Malformed annual_returns: {e}") from e

        statistics = payload.get("statistics")
        if statistics is not None:
            try:
                mean_return = float(statistics["mean_return"])
                std_deviation = float(statistics["std_deviation"])
            except (KeyError, TypeError, ValueError) as e:
                raise DatasetError("payload", f"Malformed statistics: {e}") from e
        elif len(returns) > 0:
            mean_return = float(returns.mean())
            std_deviation = float(returns.std(ddof=1)) if len(returns) > 1 else 0.0
        else:
            mean_return = 0.0
            std_deviation = 0.0

        return cls(
            years=years,
            returns=returns,
            mean_return=mean_return,
            std_deviation=std_deviation,
        )

    def __len__(self) -> int:
        return len(self.returns)

    def as_frame(self) -> pd.DataFrame:
        """Return the observations as a DataFrame indexed by year."""
        return pd.DataFrame(
            {"return": np.asarray(self.returns)},
            index=pd.Index(np.asarray(self.years), name="year"),
        )

    def sample_path(self, years: int, rng: np.random.Generator) -> np.ndarray:
        """
        Draw one bootstrap return path of length ``years``.

        Each element is chosen uniformly at random, with replacement, from
        the historical observations. Repeats and identical paths are
        expected; there is no serial correlation or regime modelling.
        """
        if years <= 0:
            raise ValidationError("years", "Must sample at least 1 year")
        indices = rng.integers(0, len(self.returns), size=years)
        return self.returns[indices]

    def sample_paths(
        self,
        n_paths: int,
        years: int,
        rng: np.random.Generator,
    ) -> np.ndarray:
        """
        Draw ``n_paths`` independent bootstrap paths at once.

        Returns:
            2D array of shape (n_paths, years)
        """
        if years <= 0:
            raise ValidationError("years", "Must sample at least 1 year")
        if n_paths <= 0:
            raise ValidationError("n_paths", "Must sample at least 1 path")
        logger.debug(f"Sampling {n_paths} bootstrap paths of {years} years")
        indices = rng.integers(0, len(self.returns), size=(n_paths, years))
        return self.returns[indices]


def load_historical_returns(path: Path = DEFAULT_DATA_PATH) -> HistoricalReturns:
    """
    Load the historical returns dataset from a JSON file.

    Args:
        path: Path to the dataset file (defaults to the bundled Nordic index)

    Returns:
        Immutable HistoricalReturns value object
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except OSError as e:
        logger.error(f"Could not read returns dataset {path}: {e}")
        raise DatasetError(str(path), str(e)) from e
    except json.JSONDecodeError as e:
        logger.error(f"Returns dataset {path} is not valid JSON: {e}")
        raise DatasetError(str(path), f"Invalid JSON: {e}") from e

    if not isinstance(payload, dict):
        raise DatasetError(str(path), "Top-level JSON value must be an object")

    try:
        dataset = HistoricalReturns.from_payload(payload)
    except DatasetError as e:
        raise DatasetError(str(path), e.message) from e

    logger.info(
        f"Loaded {len(dataset)} annual returns from {path.name} "
        f"(mean {dataset.mean_return:.2%}, std {dataset.std_deviation:.2%})"
    )
    return dataset


def get_historical_summary(dataset: HistoricalReturns) -> dict:
    """
    Get summary statistics about the historical data being used.

    Returns:
        Dict with year range, best/worst years and growth statistics
    """
    frame = dataset.as_frame()
    series = frame["return"]

    n_years = len(series)
    growth = float((1 + series).prod())
    cagr = growth ** (1 / n_years) - 1 if growth > 0 else -1.0

    return {
        "start_year": int(frame.index.min()),
        "end_year": int(frame.index.max()),
        "n_years": n_years,
        "mean_return": float(series.mean()),
        "std_deviation": float(series.std(ddof=1)) if n_years > 1 else 0.0,
        "stated_mean_return": dataset.mean_return,
        "stated_std_deviation": dataset.std_deviation,
        "best_year": int(series.idxmax()),
        "best_return": float(series.max()),
        "worst_year": int(series.idxmin()),
        "worst_return": float(series.min()),
        "negative_years": int((series < 0).sum()),
        "compound_annual_growth": cagr,
    }
