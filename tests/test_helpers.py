"""Tests for helper utility functions."""

import pytest

from paydown.helpers import Percentiles, format_nok, format_percent, percent_to_fraction


class TestFormatNok:
    """Tests for currency formatting."""

    def test_whole_kroner(self):
        """Thousands separated by spaces."""
        assert format_nok(1_511_980.74) == "1 511 981 kr"

    def test_small(self):
        """Small values have no separator."""
        assert format_nok(950) == "950 kr"

    def test_zero(self):
        """Zero formats correctly."""
        assert format_nok(0) == "0 kr"

    def test_negative(self):
        """Negative numbers keep the sign."""
        assert format_nok(-12_000) == "-12 000 kr"

    def test_compact(self):
        """Millions are abbreviated in compact mode."""
        assert format_nok(1_500_000, compact=True) == "1,5 mill. kr"

    def test_compact_small_values_unchanged(self):
        """Compact mode only kicks in from one million."""
        assert format_nok(999_000, compact=True) == "999 000 kr"


class TestFormatPercent:
    """Tests for percent formatting."""

    def test_fraction(self):
        """Fractions are scaled to percent."""
        assert format_percent(0.6234) == "62.3%"

    def test_already_percent(self):
        """Percent values are not scaled."""
        assert format_percent(45, decimals=0, is_fraction=False) == "45%"


class TestPercentToFraction:
    """Tests for percent input conversion."""

    def test_conversion(self):
        """4.5 percent is 0.045."""
        assert percent_to_fraction(4.5) == pytest.approx(0.045)


class TestPercentiles:
    """Tests for Percentiles dataclass."""

    def test_frozen(self):
        """Percentiles is immutable (frozen)."""
        p = Percentiles(p5=1.0, p25=2.0, p50=3.0, p75=4.0, p95=5.0)
        with pytest.raises(AttributeError):
            p.p5 = 10.0
