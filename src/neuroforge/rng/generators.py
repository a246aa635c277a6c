"""
Random Number Generators Module

This module implements the random number generator capability consumed by
chromosomes and learning algorithms wherever stochastic values are needed
(chromosome initialization, mutation magnitudes, ...).

Every generator owns its own numpy Generator, so each logical random stream
can be seeded independently. Passing seed=None gives a process-seeded stream.

Classes:
    RandomNumberGenerator: Abstract base class defining the generator interface
    UniformOneGenerator:   Uniform distribution in [0, 1)
    UniformGenerator:      Uniform distribution in [min, max) of a Range
    ExponentialGenerator:  Exponential distribution with a given rate
"""

import numpy as np
from abc import ABC, abstractmethod

from neuroforge.core import Range


class RandomNumberGenerator(ABC):
    """
    Abstract random number generator.

    Public Properties:
        mean:     Mean value of the generator's distribution
        variance: Variance of the generator's distribution

    Public Methods:
        next():         Draw the next random number
        set_seed(seed): Re-seed the generator
    """

    @property
    @abstractmethod
    def mean(self) -> float:
        pass

    @property
    @abstractmethod
    def variance(self) -> float:
        pass

    @abstractmethod
    def next(self) -> float:
        pass

    @abstractmethod
    def set_seed(self, seed: int | None) -> None:
        pass


class UniformOneGenerator(RandomNumberGenerator):
    """
    Uniform random numbers in the [0, 1) range.
    """

    def __init__(self, seed: int | None = None):
        self._rand = np.random.default_rng(seed)

    @property
    def mean(self) -> float:
        return 0.5

    @property
    def variance(self) -> float:
        return 1.0 / 12

    def next(self) -> float:
        return float(self._rand.random())

    def set_seed(self, seed: int | None) -> None:
        self._rand = np.random.default_rng(seed)


class UniformGenerator(RandomNumberGenerator):
    """
    Uniform random numbers in the [min, max) interval of a Range.
    """

    def __init__(self, value_range: Range, seed: int | None = None):
        """
        Parameters:
            value_range: range of the generated values
            seed:        seed of the underlying uniform [0, 1) stream
        """
        self._rand   = UniformOneGenerator(seed)
        self._min    = value_range.min
        self._length = value_range.length

    @property
    def range(self) -> Range:
        """Range of the generated values."""
        return Range(self._min, self._min + self._length)

    @property
    def mean(self) -> float:
        return (self._min + self._min + self._length) / 2

    @property
    def variance(self) -> float:
        return self._length * self._length / 12

    def next(self) -> float:
        return self._rand.next() * self._length + self._min

    def set_seed(self, seed: int | None) -> None:
        self._rand.set_seed(seed)


class ExponentialGenerator(RandomNumberGenerator):
    """
    Exponential random numbers: -ln(U) / rate, U uniform in (0, 1].
    """

    def __init__(self, rate: float, seed: int | None = None):
        """
        Parameters:
            rate: rate (lambda) of the distribution, must be positive
            seed: seed of the underlying uniform stream

        Raises:
            ValueError: if the rate is not greater than zero
        """
        if rate <= 0:
            raise ValueError("Rate value should be greater than zero.")

        self.rate: float = rate
        self._rand = UniformOneGenerator(seed)

    @property
    def mean(self) -> float:
        return 1.0 / self.rate

    @property
    def variance(self) -> float:
        return 1.0 / (self.rate * self.rate)

    def next(self) -> float:
        # 1 - U lies in (0, 1], keeping the logarithm finite
        return float(-np.log(1.0 - self._rand.next()) / self.rate)

    def set_seed(self, seed: int | None) -> None:
        self._rand.set_seed(seed)
