"""
Unit tests for ShortArrayChromosome.
"""

import pytest
import numpy as np

from neuroforge.genotype import ShortArrayChromosome


class TestShortArrayInit:
    """Test clamping and random generation."""

    def test_defaults(self, rng):
        chromosome = ShortArrayChromosome(10, rng=rng)
        assert chromosome.length == 10
        assert chromosome.max_value == 32767

    @pytest.mark.parametrize("max_value, expected", [(0, 1), (5, 5), (100000, 32767)])
    def test_max_value_clamped(self, rng, max_value, expected):
        assert ShortArrayChromosome(4, max_value, rng).max_value == expected

    def test_length_clamped(self, rng):
        assert ShortArrayChromosome(1, 5, rng).length == 2

    def test_genes_within_bounds(self, rng):
        chromosome = ShortArrayChromosome(200, 7, rng)
        assert chromosome.values.min() >= 0
        assert chromosome.values.max() <= 7

    def test_str(self, rng):
        chromosome = ShortArrayChromosome(3, 9, rng)
        chromosome.values[:] = [1, 2, 3]
        assert str(chromosome) == "1 2 3"


class TestShortArrayOperators:
    """Test mutation, crossover and copies."""

    def test_mutate_changes_at_most_one_gene(self, rng):
        chromosome = ShortArrayChromosome(20, 1000, rng)
        for _ in range(20):
            before = chromosome.values.copy()
            chromosome.mutate()
            assert np.count_nonzero(before != chromosome.values) <= 1
            assert 0 <= chromosome.values.min() and chromosome.values.max() <= 1000

    def test_crossover_swaps_tails(self, rng):
        a = ShortArrayChromosome(6, 9, rng)
        b = ShortArrayChromosome(6, 9, rng)
        a.values[:] = 0
        b.values[:] = 9

        a.crossover(b)

        point = int(np.argmax(a.values == 9))
        assert 1 <= point <= 5
        np.testing.assert_array_equal(a.values, [0] * point + [9] * (6 - point))
        np.testing.assert_array_equal(b.values, [9] * point + [0] * (6 - point))

    def test_crossover_other_length_ignored(self, rng):
        a = ShortArrayChromosome(6, 9, rng)
        b = ShortArrayChromosome(7, 9, rng)
        va, vb = a.values.copy(), b.values.copy()

        a.crossover(b)
        np.testing.assert_array_equal(a.values, va)
        np.testing.assert_array_equal(b.values, vb)

    def test_clone_copies_genes(self, rng):
        a = ShortArrayChromosome(5, 9, rng)
        a.fitness = 2.0
        b = a.clone()

        np.testing.assert_array_equal(a.values, b.values)
        assert b.fitness == 2.0
        assert b.values is not a.values
        assert b.rng is a.rng

    def test_create_new_keeps_shape(self, rng):
        a = ShortArrayChromosome(5, 9, rng)
        a.fitness = 2.0
        b = a.create_new()

        assert (b.length, b.max_value, b.fitness) == (5, 9, 0.0)
        assert b.values is not a.values
