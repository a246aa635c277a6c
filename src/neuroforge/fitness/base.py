"""
Fitness Function Base Module

Classes:
    FitnessFunction: Abstract fitness function evaluating chromosomes
"""

from abc    import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from neuroforge.genotype import Chromosome


class FitnessFunction(ABC):
    """
    Abstract fitness function.

    A fitness function maps a chromosome to a fitness value; larger values
    mean better chromosomes.
    """

    @abstractmethod
    def evaluate(self, chromosome: 'Chromosome') -> float:
        """
        Evaluate a chromosome.

        Parameters:
            chromosome: the chromosome to evaluate

        Returns:
            Fitness value of the chromosome (larger is better)
        """
        pass
