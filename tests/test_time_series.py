"""Tests for time series percentile bands."""

import numpy as np
import pytest

from paydown.time_series import compute_time_series_bands


class TestComputeTimeSeriesBands:
    """Tests for compute_time_series_bands."""

    def test_one_band_per_year(self):
        """Bands cover years 0..horizon in order."""
        paths = np.zeros((10, 6))
        bands = compute_time_series_bands(paths, 5)
        assert [b.year for b in bands] == [0, 1, 2, 3, 4, 5]

    def test_year_zero_is_zero(self):
        """No contributions at year 0."""
        rng = np.random.default_rng(0)
        paths = np.hstack([np.zeros((100, 1)), rng.uniform(0, 1e6, size=(100, 3))])
        bands = compute_time_series_bands(paths, 3)
        assert bands[0].p50 == 0.0
        assert bands[0].mean == 0.0

    def test_bands_ordered(self):
        """p5 <= p25 <= p50 <= p75 <= p95 for every year."""
        rng = np.random.default_rng(1)
        paths = rng.normal(size=(257, 11)) * 1e5
        for band in compute_time_series_bands(paths, 10):
            assert band.p5 <= band.p25 <= band.p50 <= band.p75 <= band.p95

    def test_nearest_rank_values(self):
        """Percentiles use the nearest-rank convention per column."""
        column = np.arange(100, 0, -1, dtype=float)
        paths = np.column_stack([np.zeros(100), column])
        band = compute_time_series_bands(paths, 1)[1]
        assert band.p5 == 6
        assert band.p25 == 26
        assert band.p50 == 51
        assert band.p75 == 76
        assert band.p95 == 96
        assert band.mean == pytest.approx(50.5)

    def test_mortgage_paired(self):
        """Each band carries the mortgage value for its year."""
        paths = np.ones((4, 3))
        bands = compute_time_series_bands(paths, 2, mortgage_path=[0.0, 10.0, 20.0])
        assert [b.mortgage for b in bands] == [0.0, 10.0, 20.0]

    def test_mortgage_optional(self):
        """Without a mortgage path the field is None."""
        bands = compute_time_series_bands(np.ones((4, 3)), 2)
        assert all(b.mortgage is None for b in bands)

    def test_empty_paths(self):
        """No paths gives no bands."""
        assert compute_time_series_bands(np.empty((0, 6)), 5) == []

    def test_shape_mismatch(self):
        """Too few columns for the horizon raises."""
        with pytest.raises(ValueError):
            compute_time_series_bands(np.ones((4, 3)), 5)

    def test_short_mortgage_path(self):
        """Mortgage path must cover every year."""
        with pytest.raises(ValueError):
            compute_time_series_bands(np.ones((4, 3)), 2, mortgage_path=[0.0, 1.0])
