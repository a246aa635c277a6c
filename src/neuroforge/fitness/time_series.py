"""
Time Series Prediction Fitness Module

Classes:
    TimeSeriesPredictionFitness: Fitness of an expression predicting a time series
"""

import math
import logging
from typing import Sequence

from neuroforge.core         import PolishExpression
from neuroforge.fitness.base import FitnessFunction

logger = logging.getLogger(__name__)


class TimeSeriesPredictionFitness(FitnessFunction):
    """
    Fitness function for time series prediction.

    The chromosome's string form is read as a polish-notation expression that
    predicts the next value of the series from a window of past values:
    $0 is the most recent value of the window, $1 the one before it, and so on
    up to $(window_size - 1). The constants follow as $window_size, ...

    The window slides over the series, leaving the last 'prediction_size'
    values out of the evaluation. With the absolute prediction error summed
    over all positions:

        fitness = 100 / (error + 1)

    NaN results and evaluation errors give fitness 0.
    """

    def __init__(self,
                 data           : Sequence[float],
                 window_size    : int,
                 prediction_size: int,
                 constants      : Sequence[float]):
        """
        Parameters:
            data:            the time series
            window_size:     number of past values used for one prediction
            prediction_size: number of final values excluded from the evaluation
            constants:       values of the constant variables

        Raises:
            ValueError: if the series is too short for the window and prediction sizes
        """
        if window_size >= len(data):
            raise ValueError("Window size should be less than data amount")
        if len(data) - window_size - prediction_size < 1:
            raise ValueError("Data size should be enough for window and prediction")

        self._data            = [float(v) for v in data]
        self._window_size     = window_size
        self._prediction_size = prediction_size
        self._constants       = [float(c) for c in constants]

    def evaluate(self, chromosome) -> float:
        expression = str(chromosome)
        window     = self._window_size

        error = 0.0
        for i in range(len(self._data) - window - self._prediction_size):
            # most recent value first
            variables = self._data[i:i + window][::-1] + self._constants
            try:
                y = PolishExpression.evaluate(expression, variables)
            except (ValueError, IndexError, ArithmeticError) as e:
                logger.debug("Expression '%s' could not be evaluated: %s", expression, e)
                return 0.0
            if math.isnan(y):
                return 0.0
            error += abs(y - self._data[i + window])

        return 100.0 / (error + 1)

    def translate(self, chromosome) -> str:
        """The prediction function encoded by the chromosome."""
        return str(chromosome)
