"""
Unit tests for the random number generators.
"""

import pytest

from neuroforge.core import Range
from neuroforge.rng  import UniformOneGenerator, UniformGenerator, ExponentialGenerator


class TestUniformOneGenerator:
    """Test uniform numbers in [0, 1)."""

    def test_values_in_unit_interval(self):
        generator = UniformOneGenerator(seed=1)
        values = [generator.next() for _ in range(1000)]
        assert all(0.0 <= v < 1.0 for v in values)

    def test_moments(self):
        generator = UniformOneGenerator()
        assert generator.mean == 0.5
        assert generator.variance == pytest.approx(1 / 12)

    def test_seed_reproducibility(self):
        """Test that equal seeds give equal streams, also after set_seed()."""
        g1 = UniformOneGenerator(seed=7)
        g2 = UniformOneGenerator(seed=7)
        first = [g1.next() for _ in range(5)]
        assert first == [g2.next() for _ in range(5)]

        g1.set_seed(7)
        assert [g1.next() for _ in range(5)] == first


class TestUniformGenerator:
    """Test uniform numbers in a Range."""

    def test_values_in_range(self):
        generator = UniformGenerator(Range(-1, 1), seed=3)
        values = [generator.next() for _ in range(1000)]
        assert all(-1.0 <= v < 1.0 for v in values)

    def test_moments(self):
        generator = UniformGenerator(Range(2, 6))
        assert generator.mean == pytest.approx(4.0)
        assert generator.variance == pytest.approx(16 / 12)

    def test_range_property(self):
        assert UniformGenerator(Range(-0.5, 0.5)).range == Range(-0.5, 0.5)


class TestExponentialGenerator:
    """Test exponentially distributed numbers."""

    def test_invalid_rate(self):
        with pytest.raises(ValueError):
            ExponentialGenerator(0)
        with pytest.raises(ValueError):
            ExponentialGenerator(-1)

    def test_values_non_negative(self):
        generator = ExponentialGenerator(2.0, seed=5)
        values = [generator.next() for _ in range(1000)]
        assert all(v >= 0.0 for v in values)
        assert all(isinstance(v, float) for v in values)

    def test_moments(self):
        generator = ExponentialGenerator(2.0)
        assert generator.mean == pytest.approx(0.5)
        assert generator.variance == pytest.approx(0.25)

    def test_sample_mean(self):
        """Test that the sample mean is close to 1 / rate."""
        generator = ExponentialGenerator(1.0, seed=11)
        values = [generator.next() for _ in range(20000)]
        assert sum(values) / len(values) == pytest.approx(1.0, rel=0.05)
