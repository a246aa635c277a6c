"""
Selection Methods Module

Selection methods reduce a population, grown by crossover and mutation, back
to a target size. They operate on the list of chromosomes in place.

Classes:
    SelectionMethod:        Abstract selection method
    EliteSelection:         Keep the fittest chromosomes
    RankSelection:          Rank-proportional wheel selection
    RouletteWheelSelection: Fitness-proportional wheel selection
"""

import numpy as np
from abc import ABC, abstractmethod

from neuroforge.genotype import Chromosome


class SelectionMethod(ABC):
    """
    Abstract selection method.

    Public Methods:
        apply_selection(chromosomes, size): Reduce the list to 'size' chromosomes, in place
    """

    def __init__(self, rng: np.random.Generator | None = None):
        """
        Parameters:
            rng: random generator for stochastic methods; process-seeded if None
        """
        self._rng = rng if rng is not None else np.random.default_rng()

    @abstractmethod
    def apply_selection(self, chromosomes: list[Chromosome], size: int) -> None:
        """
        Select 'size' chromosomes, replacing the content of the list.

        Parameters:
            chromosomes: the chromosomes to select from; modified in place
            size:        number of chromosomes to keep
        """
        pass

    def _spin_wheel(self, chromosomes: list[Chromosome], weights: np.ndarray, size: int) -> None:
        """Pick 'size' clones with probabilities proportional to 'weights'."""
        # Normalize by the largest weight so the sum cannot overflow
        top = weights.max()
        if np.isinf(top):
            weights = np.isinf(weights).astype(float)
        elif top > 0:
            weights = weights / top

        total = weights.sum()
        if total > 0:
            probabilities = weights / total
        else:
            probabilities = np.full(len(chromosomes), 1.0 / len(chromosomes))

        picks    = self._rng.choice(len(chromosomes), size=size, p=probabilities)
        selected = [chromosomes[i].clone() for i in picks]
        chromosomes[:] = selected


class EliteSelection(SelectionMethod):
    """
    Elite selection: the 'size' fittest chromosomes survive.
    """

    def apply_selection(self, chromosomes: list[Chromosome], size: int) -> None:
        chromosomes.sort()
        del chromosomes[size:]


class RankSelection(SelectionMethod):
    """
    Rank selection.

    The chromosomes are sorted by fitness and the i-th best (0-based) gets
    weight n - i; 'size' chromosomes are then drawn with probability
    proportional to their weight. The same chromosome may be drawn several
    times, each pick being a separate clone.
    """

    def apply_selection(self, chromosomes: list[Chromosome], size: int) -> None:
        chromosomes.sort()
        n = len(chromosomes)
        self._spin_wheel(chromosomes, np.arange(n, 0, -1, dtype=float), size)


class RouletteWheelSelection(SelectionMethod):
    """
    Roulette wheel selection.

    'size' chromosomes are drawn with probability proportional to their
    fitness (negative fitness counts as 0). Picks are clones.
    """

    def apply_selection(self, chromosomes: list[Chromosome], size: int) -> None:
        fitness = np.array([max(0.0, c.fitness) for c in chromosomes], dtype=float)
        self._spin_wheel(chromosomes, fitness, size)
