"""
Chromosome Base Module

This module defines the interface shared by all chromosomes of the genetic
algorithms.

Classes:
    Chromosome: Abstract base class of all chromosomes
"""

import numpy as np
from abc    import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from neuroforge.fitness import FitnessFunction


class Chromosome(ABC):
    """
    Abstract chromosome.

    A chromosome is a candidate solution: a genome plus its fitness, the value
    assigned by the last evaluation (0 until evaluated). Ordering is by fitness
    in descending order, so sorting a list of chromosomes puts the fittest first.

    Every chromosome owns a random generator. Chromosomes obtained through
    clone() or create_new() share the generator of the chromosome they come from.

    Public Attributes:
        fitness: Fitness value assigned by the last evaluation

    Public Methods:
        generate():        Fill the chromosome with random genes
        create_new():      Create a new random chromosome of the same kind
        clone():           Create an exact copy
        mutate():          Apply a random mutation, in place
        crossover(pair):   Recombine with another chromosome; modifies both
        evaluate(function): Compute and store the fitness
    """

    def __init__(self, rng: np.random.Generator | None = None):
        self._rng = rng if rng is not None else np.random.default_rng()
        self.fitness: float = 0.0

    @property
    def rng(self) -> np.random.Generator:
        return self._rng

    @abstractmethod
    def generate(self) -> None:
        """Generate random genes for the chromosome."""
        pass

    @abstractmethod
    def create_new(self) -> 'Chromosome':
        """
        Create a new randomly initialized chromosome of the same type and size.
        The fitness of the new chromosome is 0.
        """
        pass

    @abstractmethod
    def clone(self) -> 'Chromosome':
        """Create a copy with identical genes and fitness."""
        pass

    @abstractmethod
    def mutate(self) -> None:
        pass

    @abstractmethod
    def crossover(self, pair: 'Chromosome') -> None:
        """
        Crossover with another chromosome.

        Both chromosomes are replaced by the two offspring: 'self' becomes the
        first child and 'pair' the second. Nothing happens if 'pair' is of a
        different type or length.
        """
        pass

    def evaluate(self, function: 'FitnessFunction') -> None:
        """
        Evaluate the chromosome and store the result in 'fitness'.

        Parameters:
            function: fitness function to use
        """
        self.fitness = function.evaluate(self)

    def __lt__(self, other: 'Chromosome') -> bool:
        # descending order of fitness
        return self.fitness > other.fitness
