"""
Shared fixtures for the population tests.
"""

import pytest

from neuroforge.genotype import BinaryChromosome
from neuroforge.fitness  import FitnessFunction


class CountOnes(FitnessFunction):
    """Fitness = number of set bits."""

    def evaluate(self, chromosome):
        return float(bin(chromosome.value).count("1"))


@pytest.fixture
def count_ones():
    return CountOnes()


@pytest.fixture
def ancestor(rng):
    return BinaryChromosome(16, rng)


@pytest.fixture
def with_fitness(rng):
    def make(*values):
        chromosomes = []
        for f in values:
            c = BinaryChromosome(8, rng)
            c.fitness = f
            chromosomes.append(c)
        return chromosomes
    return make
