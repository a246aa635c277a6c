"""
Symbolic Regression Fitness Module

Classes:
    SymbolicRegressionFitness: Fitness of an expression approximating a set of (x, y) points
"""

import math
import logging
from typing import Sequence

from neuroforge.core         import PolishExpression
from neuroforge.fitness.base import FitnessFunction

logger = logging.getLogger(__name__)


class SymbolicRegressionFitness(FitnessFunction):
    """
    Fitness function for symbolic regression (function approximation).

    The chromosome's string form is read as a polish-notation expression in
    which $0 is the argument x and $1, $2, ... are the supplied constants.
    With the absolute error summed over all data points:

        fitness = 100 / (error + 1)

    A chromosome whose expression evaluates to NaN, or cannot be evaluated at
    all, gets fitness 0.
    """

    def __init__(self, data: Sequence[Sequence[float]], constants: Sequence[float]):
        """
        Parameters:
            data:      the points to approximate, as (x, y) pairs
            constants: values of the variables $1, $2, ...
        """
        self._data      = [(float(x), float(y)) for x, y in data]
        self._constants = [float(c) for c in constants]

    def evaluate(self, chromosome) -> float:
        expression = str(chromosome)
        variables  = [0.0] + self._constants

        error = 0.0
        for x, target in self._data:
            variables[0] = x
            try:
                y = PolishExpression.evaluate(expression, variables)
            except (ValueError, IndexError, ArithmeticError) as e:
                logger.debug("Expression '%s' could not be evaluated: %s", expression, e)
                return 0.0
            if math.isnan(y):
                return 0.0
            error += abs(y - target)

        return 100.0 / (error + 1)

    def translate(self, chromosome) -> str:
        """The approximation function encoded by the chromosome."""
        return str(chromosome)
