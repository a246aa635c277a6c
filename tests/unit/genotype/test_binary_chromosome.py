"""
Unit tests for BinaryChromosome.
"""

import pytest
import numpy as np

from neuroforge.genotype import BinaryChromosome


# ============================================================================
# Construction
# ============================================================================

class TestBinaryInit:
    """Test length clamping and random generation."""

    @pytest.mark.parametrize("length, expected", [(1, 2), (2, 2), (10, 10), (64, 64), (100, 64)])
    def test_length_clamped(self, rng, length, expected):
        assert BinaryChromosome(length, rng).length == expected

    def test_value_within_max(self, rng):
        for _ in range(50):
            chromosome = BinaryChromosome(5, rng)
            assert 0 <= chromosome.value <= chromosome.max_value == 31

    def test_full_length_max_value(self, rng):
        assert BinaryChromosome(64, rng).max_value == 2**64 - 1

    def test_initial_fitness_zero(self, rng):
        assert BinaryChromosome(8, rng).fitness == 0.0

    def test_str_is_padded_bit_string(self, rng):
        chromosome = BinaryChromosome(12, rng)
        text = str(chromosome)
        assert len(text) == 12
        assert set(text) <= {"0", "1"}
        assert int(text, 2) == chromosome.value


# ============================================================================
# Operators
# ============================================================================

class TestBinaryOperators:
    """Test mutation, crossover and copies."""

    def test_mutate_flips_single_bit(self, rng):
        chromosome = BinaryChromosome(16, rng)
        for _ in range(20):
            before = chromosome.value
            chromosome.mutate()
            assert bin(before ^ chromosome.value).count("1") == 1

    def test_crossover_swaps_high_bits(self, rng):
        a = BinaryChromosome(8, rng)
        b = BinaryChromosome(8, rng)
        a._value = 0b00000000
        b._value = 0b11111111

        a.crossover(b)

        # complementary parents produce complementary children
        assert a.value ^ b.value == 0b11111111
        # the lowest bit always stays and the highest is always exchanged
        assert a.value & 1 == 0
        assert a.value >> 7 == 1
        # a keeps a run of low zeros and receives a run of high ones
        assert format(a.value, "08b").lstrip("1").strip("0") == ""

    def test_crossover_other_length_ignored(self, rng):
        a = BinaryChromosome(8, rng)
        b = BinaryChromosome(9, rng)
        va, vb = a.value, b.value

        a.crossover(b)
        assert (a.value, b.value) == (va, vb)

    def test_clone_is_independent(self, rng):
        a = BinaryChromosome(8, rng)
        a.fitness = 3.0
        b = a.clone()

        assert (b.value, b.fitness) == (a.value, 3.0)
        assert b.rng is a.rng

        b.mutate()
        assert b.value != a.value

    def test_create_new(self, rng):
        a = BinaryChromosome(8, rng)
        a.fitness = 3.0
        b = a.create_new()
        assert b.length == 8
        assert b.fitness == 0.0
        assert b.rng is a.rng

    def test_sort_fittest_first(self, rng):
        chromosomes = [BinaryChromosome(4, rng) for _ in range(3)]
        for c, f in zip(chromosomes, [1.0, 3.0, 2.0]):
            c.fitness = f
        chromosomes.sort()
        assert [c.fitness for c in chromosomes] == [3.0, 2.0, 1.0]
