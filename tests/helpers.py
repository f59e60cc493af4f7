import numpy as np


def constant_path_generator(annual_return: float):
    """Path generator stub that always returns the same annual return."""

    def generate(years: int, rng: np.random.Generator) -> np.ndarray:
        return np.full(years, annual_return)

    return generate
