"""
Binary Chromosome Module

Classes:
    BinaryChromosome: Chromosome holding a bit string of up to 64 bits
"""

import copy
import numpy as np

from neuroforge.genotype.chromosome_base import Chromosome


class BinaryChromosome(Chromosome):
    """
    Binary chromosome: a string of 'length' bits stored as a single integer.

    Mutation flips one random bit. Crossover is single point: a random point
    p in [1, length-1] is chosen, the p least significant bits stay in place
    and the remaining high bits are exchanged between the two chromosomes.

    The string form lists the bits most significant first, e.g. '0101'.

    Public Properties:
        length:    Number of bits, clamped to [2, 64]
        value:     The integer value of the bit string
        max_value: Largest representable value, 2**length - 1
    """

    MAX_LENGTH = 64

    def __init__(self, length: int, rng: np.random.Generator | None = None):
        """
        Parameters:
            length: number of bits, clamped to [2, 64]
            rng:    random generator; process-seeded if None
        """
        super().__init__(rng)
        self._length: int = max(2, min(self.MAX_LENGTH, length))
        self._value : int = 0
        self.generate()

    @property
    def length(self) -> int:
        return self._length

    @property
    def value(self) -> int:
        return self._value

    @property
    def max_value(self) -> int:
        return (1 << self._length) - 1

    def generate(self) -> None:
        self._value = int.from_bytes(self._rng.bytes(8), 'little') & self.max_value

    def create_new(self) -> 'BinaryChromosome':
        return BinaryChromosome(self._length, self._rng)

    def clone(self) -> 'BinaryChromosome':
        return copy.copy(self)

    def mutate(self) -> None:
        """Flip one randomly chosen bit."""
        self._value ^= 1 << int(self._rng.integers(self._length))

    def crossover(self, pair: Chromosome) -> None:
        if type(pair) is not type(self) or pair.length != self._length:
            return

        point     = int(self._rng.integers(1, self._length))
        low_mask  = (1 << point) - 1
        high_mask = self.max_value ^ low_mask

        v1, v2 = self._value, pair._value
        self._value = (v1 & low_mask) | (v2 & high_mask)
        pair._value = (v2 & low_mask) | (v1 & high_mask)

    def __str__(self):
        return format(self._value, f'0{self._length}b')

    def __repr__(self):
        return f"BinaryChromosome(length={self._length}, value={self._value}, fitness={self.fitness})"
