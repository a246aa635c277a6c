"""
Function Optimization Fitness Module

Fitness functions for searching the extremum of a user supplied function of
one or two variables. The search space is encoded by a BinaryChromosome whose
integer value is scaled into the optimization range.

Classes:
    Mode:                   Optimization direction (maximization, minimization)
    OptimizationFunction1D: Base class for optimizing f(x)
    OptimizationFunction2D: Base class for optimizing f(x, y)

Example:
    >>> class UserFunction(OptimizationFunction1D):
    ...     def __init__(self):
    ...         super().__init__(Range(0, 255))
    ...     def optimization_function(self, x):
    ...         return math.cos(x / 23) * math.sin(x / 50) + 2
"""

import sys
from abc  import abstractmethod
from enum import Enum

from neuroforge.core         import Range
from neuroforge.genotype     import BinaryChromosome
from neuroforge.fitness.base import FitnessFunction


class Mode(Enum):
    """
    Optimization direction. In minimization mode the fitness is the
    reciprocal of the function value, so the function must stay positive.
    A zero value gets the largest float as fitness.
    """
    MAXIMIZATION = "max"
    MINIMIZATION = "min"


def to_fitness(function_value: float, mode: Mode) -> float:
    """Fitness of a function value; a zero value is the best possible minimum."""
    if mode == Mode.MAXIMIZATION:
        return function_value
    if function_value == 0:
        return sys.float_info.max
    return 1 / function_value


class OptimizationFunction1D(FitnessFunction):
    """
    Fitness function for optimizing a function of one variable.

    The chromosome's value v is mapped into the range as:
        x = v * range.length / max_value + range.min

    Public Attributes:
        range: The optimization range
        mode:  Optimization mode (default MAXIMIZATION)
    """

    def __init__(self, value_range: Range):
        self.range: Range = value_range
        self.mode : Mode  = Mode.MAXIMIZATION

    def evaluate(self, chromosome: BinaryChromosome) -> float:
        function_value = self.optimization_function(self.translate(chromosome))
        return to_fitness(function_value, self.mode)

    def translate(self, chromosome: BinaryChromosome) -> float:
        """Map the chromosome's binary value into the optimization range."""
        return chromosome.value * self.range.length / chromosome.max_value + self.range.min

    @abstractmethod
    def optimization_function(self, x: float) -> float:
        """The function being optimized."""
        pass


class OptimizationFunction2D(FitnessFunction):
    """
    Fitness function for optimizing a function of two variables.

    The chromosome's bits are split in two: the lower length // 2 bits encode
    x, the remaining high bits encode y. Each part is scaled into its range the
    same way OptimizationFunction1D does.

    Public Attributes:
        range_x: Optimization range of x
        range_y: Optimization range of y
        mode:    Optimization mode (default MAXIMIZATION)
    """

    def __init__(self, range_x: Range, range_y: Range):
        self.range_x: Range = range_x
        self.range_y: Range = range_y
        self.mode   : Mode  = Mode.MAXIMIZATION

    def evaluate(self, chromosome: BinaryChromosome) -> float:
        x, y = self.translate(chromosome)
        function_value = self.optimization_function(x, y)
        return to_fitness(function_value, self.mode)

    def translate(self, chromosome: BinaryChromosome) -> tuple[float, float]:
        """Map the chromosome's binary value into the (x, y) optimization space."""
        value    = chromosome.value
        x_length = chromosome.length // 2
        y_length = chromosome.length - x_length

        x_max = (1 << x_length) - 1
        y_max = (1 << y_length) - 1

        x_part = value & x_max
        y_part = value >> x_length

        x = x_part * self.range_x.length / x_max + self.range_x.min
        y = y_part * self.range_y.length / y_max + self.range_y.min
        return x, y

    @abstractmethod
    def optimization_function(self, x: float, y: float) -> float:
        pass
