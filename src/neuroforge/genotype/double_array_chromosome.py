"""
Double Array Chromosome Module

Classes:
    DoubleArrayChromosome: Chromosome holding an array of real numbers
"""

import copy
import numpy as np
from typing import Sequence

from neuroforge.rng                      import RandomNumberGenerator
from neuroforge.genotype.chromosome_base import Chromosome


class DoubleArrayChromosome(Chromosome):
    """
    Chromosome holding an array of real numbers.

    Three random number generators drive the genetic operators: one draws the
    initial genes, the other two supply the mutation factors. A mutation picks a
    random gene and, with probability 'mutation_balancer', multiplies it by a
    value from the multiplier generator, otherwise adds a value from the
    addition generator.

    With probability 'crossover_balancer' the crossover is single point
    (the tails after a point in [1, length-1] are exchanged); otherwise it is
    arithmetic: for a random factor f in (-1, 1), every pair of genes a, b
    becomes a - (a - b) * f, b + (a - b) * f.

    Public Attributes:
        mutation_balancer:  Probability of a multiplicative mutation (default 0.5)
        crossover_balancer: Probability of a single point crossover (default 0.5)

    Public Properties:
        length: Number of genes, clamped to [2, 65536]
        values: The genes (numpy array, modifiable in place)
    """

    MAX_LENGTH = 65536

    def __init__(self,
                 chromosome_generator         : RandomNumberGenerator,
                 mutation_multiplier_generator: RandomNumberGenerator,
                 mutation_addition_generator  : RandomNumberGenerator,
                 length                       : int,
                 rng                          : np.random.Generator | None = None):
        """
        Create a chromosome with random genes.

        Parameters:
            chromosome_generator:          generator of the initial gene values
            mutation_multiplier_generator: generator of multiplicative mutation factors
            mutation_addition_generator:   generator of additive mutation terms
            length:                        number of genes, clamped to [2, 65536]
            rng:                           random generator driving the operators
        """
        super().__init__(rng)
        self._chromosome_generator          = chromosome_generator
        self._mutation_multiplier_generator = mutation_multiplier_generator
        self._mutation_addition_generator   = mutation_addition_generator

        self.mutation_balancer : float = 0.5
        self.crossover_balancer: float = 0.5

        self._length: int        = max(2, min(self.MAX_LENGTH, length))
        self._values: np.ndarray = np.zeros(self._length)
        self.generate()

    @classmethod
    def from_values(cls,
                    chromosome_generator         : RandomNumberGenerator,
                    mutation_multiplier_generator: RandomNumberGenerator,
                    mutation_addition_generator  : RandomNumberGenerator,
                    values                       : Sequence[float],
                    rng                          : np.random.Generator | None = None) -> 'DoubleArrayChromosome':
        """
        Create a chromosome holding a copy of the given genes.

        Raises:
            ValueError: if the number of values is outside [2, 65536]
        """
        if len(values) < 2 or len(values) > cls.MAX_LENGTH:
            raise ValueError("Invalid length of values array.")

        chromosome = cls(chromosome_generator, mutation_multiplier_generator,
                         mutation_addition_generator, len(values), rng)
        chromosome._values = np.array(values, dtype=float)
        return chromosome

    @property
    def length(self) -> int:
        return self._length

    @property
    def values(self) -> np.ndarray:
        return self._values

    def generate(self) -> None:
        self._values = np.array([self._chromosome_generator.next() for _ in range(self._length)], dtype=float)

    def create_new(self) -> 'DoubleArrayChromosome':
        chromosome = DoubleArrayChromosome(self._chromosome_generator,
                                           self._mutation_multiplier_generator,
                                           self._mutation_addition_generator,
                                           self._length,
                                           self._rng)
        chromosome.mutation_balancer  = self.mutation_balancer
        chromosome.crossover_balancer = self.crossover_balancer
        return chromosome

    def clone(self) -> 'DoubleArrayChromosome':
        chromosome = copy.copy(self)
        chromosome._values = self._values.copy()
        return chromosome

    def mutate(self) -> None:
        gene = int(self._rng.integers(self._length))

        if self._rng.random() < self.mutation_balancer:
            self._values[gene] *= self._mutation_multiplier_generator.next()
        else:
            self._values[gene] += self._mutation_addition_generator.next()

    def crossover(self, pair: Chromosome) -> None:
        if type(pair) is not type(self) or pair.length != self._length:
            return

        if self._rng.random() < self.crossover_balancer:
            point = int(self._rng.integers(1, self._length))

            tail = self._values[point:].copy()
            self._values[point:] = pair._values[point:]
            pair._values[point:] = tail
        else:
            factor = self._rng.random()
            if self._rng.integers(2) == 0:
                factor = -factor

            portion = (self._values - pair._values) * factor
            self._values -= portion
            pair._values += portion

    def __str__(self):
        return ' '.join(str(v) for v in self._values)

    def __repr__(self):
        return f"DoubleArrayChromosome(length={self._length}, fitness={self.fitness})"
