"""
Unit tests for the function optimization fitness functions.
"""

import sys
import pytest

from neuroforge.core     import Range
from neuroforge.genotype import BinaryChromosome
from neuroforge.fitness  import Mode, OptimizationFunction1D, OptimizationFunction2D


class Linear1D(OptimizationFunction1D):
    def optimization_function(self, x):
        return x + 1


class Sum2D(OptimizationFunction2D):
    def optimization_function(self, x, y):
        return x + y


def binary(length, value, rng):
    chromosome = BinaryChromosome(length, rng)
    chromosome._value = value
    return chromosome


class TestOptimization1D:
    """Test the single variable mapping."""

    def test_translate_bounds(self, rng):
        function = Linear1D(Range(-2, 6))
        assert function.translate(binary(8, 0, rng)) == -2
        assert function.translate(binary(8, 255, rng)) == 6

    def test_translate_midpoint(self, rng):
        function = Linear1D(Range(0, 30))
        assert function.translate(binary(4, 5, rng)) == pytest.approx(10)

    def test_maximization(self, rng):
        function = Linear1D(Range(0, 255))
        assert function.mode == Mode.MAXIMIZATION
        assert function.evaluate(binary(8, 3, rng)) == pytest.approx(4)

    def test_minimization(self, rng):
        function = Linear1D(Range(0, 255))
        function.mode = Mode.MINIMIZATION
        assert function.evaluate(binary(8, 3, rng)) == pytest.approx(0.25)

    def test_minimization_of_zero(self, rng):
        function = Linear1D(Range(-1, 254))
        function.mode = Mode.MINIMIZATION
        assert function.evaluate(binary(8, 0, rng)) == sys.float_info.max


class TestOptimization2D:
    """Test the two variable mapping."""

    def test_low_bits_are_x(self, rng):
        function = Sum2D(Range(0, 15), Range(0, 15))
        # x = 0b0011, y = 0b1010
        assert function.translate(binary(8, 0b10100011, rng)) == pytest.approx((3, 10))

    def test_odd_length_gives_y_extra_bit(self, rng):
        function = Sum2D(Range(0, 3), Range(0, 7))
        # length 5: x takes 2 bits, y takes 3
        x, y = function.translate(binary(5, 0b11111, rng))
        assert (x, y) == pytest.approx((3, 7))

    def test_full_length_ranges(self, rng):
        function = Sum2D(Range(-1, 1), Range(-1, 1))
        assert function.translate(binary(64, 2**64 - 1, rng)) == pytest.approx((1, 1))
        assert function.translate(binary(64, 0, rng)) == pytest.approx((-1, -1))

    def test_evaluate(self, rng):
        function = Sum2D(Range(0, 15), Range(0, 15))
        assert function.evaluate(binary(8, 0b00010001, rng)) == pytest.approx(2)

        function.mode = Mode.MINIMIZATION
        assert function.evaluate(binary(8, 0b00010001, rng)) == pytest.approx(0.5)

    def test_minimization_of_zero(self, rng):
        function = Sum2D(Range(0, 15), Range(0, 15))
        function.mode = Mode.MINIMIZATION
        assert function.evaluate(binary(8, 0, rng)) == sys.float_info.max
