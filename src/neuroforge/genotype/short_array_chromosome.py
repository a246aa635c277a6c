"""
Short Array Chromosome Module

This module implements chromosomes whose genes are small non-negative
integers, and the permutation chromosome built on top of them.

The genetic operators are supplied by a strategy object, so the same array
representation serves both free integer arrays and permutations.

Classes:
    BoundedArrayOperators:  Operators for arrays of integers in [0, max_value]
    PermutationOperators:   Operators keeping the genes a permutation of [0, length)
    ShortArrayChromosome:   Chromosome holding an array of integers in [0, max_value]
    PermutationChromosome:  ShortArrayChromosome wired with PermutationOperators
"""

import copy
import numpy as np

from neuroforge.genotype.chromosome_base import Chromosome

MAX_SHORT = 32767


class BoundedArrayOperators:
    """
    Operators for arrays of integers uniformly distributed in [0, max_value].

    mutate() replaces one random gene with a new random value; crossover()
    is single point, swapping the tails starting at a point in [1, length-1].
    """

    def generate(self, chromosome: 'ShortArrayChromosome') -> None:
        chromosome._values = chromosome.rng.integers(0, chromosome.max_value + 1, size=chromosome.length)

    def mutate(self, chromosome: 'ShortArrayChromosome') -> None:
        i = int(chromosome.rng.integers(chromosome.length))
        chromosome._values[i] = chromosome.rng.integers(0, chromosome.max_value + 1)

    def crossover(self, chromosome: 'ShortArrayChromosome', pair: 'ShortArrayChromosome') -> None:
        point = int(chromosome.rng.integers(1, chromosome.length))

        tail = chromosome._values[point:].copy()
        chromosome._values[point:] = pair._values[point:]
        pair._values[point:] = tail


class PermutationOperators:
    """
    Operators for permutations of the integers 0 .. length-1.

    generate() starts from the ascending permutation and applies length // 2
    random swaps. mutate() swaps two random genes. crossover() is an order
    based recombination which always produces valid permutations.
    """

    def generate(self, chromosome: 'ShortArrayChromosome') -> None:
        rng    = chromosome.rng
        length = chromosome.length
        values = np.arange(length)

        for _ in range(length // 2):
            j1 = int(rng.integers(length))
            j2 = int(rng.integers(length))
            values[j1], values[j2] = values[j2], values[j1]

        chromosome._values = values

    def mutate(self, chromosome: 'ShortArrayChromosome') -> None:
        rng    = chromosome.rng
        values = chromosome._values

        j1 = int(rng.integers(chromosome.length))
        j2 = int(rng.integers(chromosome.length))
        values[j1], values[j2] = values[j2], values[j1]

    def crossover(self, chromosome: 'ShortArrayChromosome', pair: 'ShortArrayChromosome') -> None:
        rng = chromosome.rng
        child1 = self._create_child(chromosome._values, pair._values, rng)
        child2 = self._create_child(pair._values, chromosome._values, rng)

        chromosome._values = child1
        pair._values = child2

    @staticmethod
    def _create_child(parent1: np.ndarray, parent2: np.ndarray, rng: np.random.Generator) -> np.ndarray:
        """
        Build a child permutation from two parents.

        The child starts with the first gene of parent2. Each following gene is
        the successor (cyclically) of the previous child gene in one of the
        parents; if neither successor is still free, a free gene is picked at
        random.
        """
        length = len(parent1)
        index1 = np.empty(length, dtype=int)
        index2 = np.empty(length, dtype=int)
        index1[parent1] = np.arange(length)
        index2[parent2] = np.arange(length)

        busy  = np.zeros(length, dtype=bool)
        child = np.empty(length, dtype=parent1.dtype)

        prev = child[0] = parent2[0]
        busy[prev] = True

        for i in range(1, length):
            next1 = parent1[(index1[prev] + 1) % length]
            next2 = parent2[(index2[prev] + 1) % length]

            valid1 = not busy[next1]
            valid2 = not busy[next2]

            if valid1 and valid2:
                prev = next1 if rng.integers(2) == 0 else next2
            elif valid1 or valid2:
                prev = next1 if valid1 else next2
            else:
                start = r = int(rng.integers(length))
                while r < length and busy[r]:
                    r += 1
                if r == length:
                    r = start - 1
                    while busy[r]:
                        r -= 1
                prev = r

            child[i] = prev
            busy[prev] = True

        return child


class ShortArrayChromosome(Chromosome):
    """
    Chromosome holding an array of integers in [0, max_value].

    Public Properties:
        length:    Number of genes, clamped to [2, 32767]
        max_value: Largest gene value, clamped to [1, 32767]
        values:    The genes (numpy integer array, modifiable in place)
    """

    MAX_LENGTH = MAX_SHORT

    def __init__(self,
                 length   : int,
                 max_value: int                         = MAX_SHORT,
                 rng      : np.random.Generator | None  = None,
                 operators: BoundedArrayOperators | PermutationOperators | None = None):
        """
        Parameters:
            length:    number of genes, clamped to [2, 32767]
            max_value: largest gene value, clamped to [1, 32767]
            rng:       random generator; process-seeded if None
            operators: genetic operators; BoundedArrayOperators if None
        """
        super().__init__(rng)
        self._length   : int = max(2, min(self.MAX_LENGTH, length))
        self._max_value: int = max(1, min(MAX_SHORT, max_value))
        self._operators = operators if operators is not None else BoundedArrayOperators()
        self._values   : np.ndarray = np.zeros(self._length, dtype=int)
        self.generate()

    @property
    def length(self) -> int:
        return self._length

    @property
    def max_value(self) -> int:
        return self._max_value

    @property
    def values(self) -> np.ndarray:
        return self._values

    def generate(self) -> None:
        self._operators.generate(self)

    def create_new(self) -> 'ShortArrayChromosome':
        chromosome = copy.copy(self)
        chromosome.fitness = 0.0
        chromosome.generate()
        return chromosome

    def clone(self) -> 'ShortArrayChromosome':
        chromosome = copy.copy(self)
        chromosome._values = self._values.copy()
        return chromosome

    def mutate(self) -> None:
        self._operators.mutate(self)

    def crossover(self, pair: Chromosome) -> None:
        if type(pair) is not type(self) or pair.length != self._length:
            return
        self._operators.crossover(self, pair)

    def __str__(self):
        return ' '.join(str(v) for v in self._values)

    def __repr__(self):
        return f"{type(self).__name__}(length={self._length}, max_value={self._max_value}, fitness={self.fitness})"


class PermutationChromosome(ShortArrayChromosome):
    """
    Chromosome holding a permutation of the integers 0 .. length-1, as used
    for ordering problems such as the traveling salesman.

    Example:
        >>> chromosome = PermutationChromosome(5)
        >>> sorted(chromosome.values.tolist())
        [0, 1, 2, 3, 4]
    """

    def __init__(self, length: int, rng: np.random.Generator | None = None):
        length = max(2, min(self.MAX_LENGTH, length))
        super().__init__(length, length - 1, rng, PermutationOperators())
