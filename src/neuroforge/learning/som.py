"""
Self-Organizing Map Learning Module

Classes:
    SOMLearning: Kohonen SOM learning for distance networks laid out on a 2D grid
"""

import math
import numpy as np
from typing import Sequence

from neuroforge.neuro         import DistanceNetwork
from neuroforge.learning.base import UnsupervisedLearning


class SOMLearning(UnsupervisedLearning):
    """
    Kohonen Self-Organizing Map learning algorithm.

    The neurons of the network's only layer are arranged on a width x height
    grid, neuron j sitting at (j % width, j // width). For each sample the
    winner (closest neuron) is found and:

      - learning_radius == 0: only the winner moves towards the input
            w += learning_rate * (input - w)
      - otherwise: every neuron moves, scaled by a Gaussian neighborhood factor
            factor = exp(-(dx^2 + dy^2) / (2 * radius^2))
            w += learning_rate * factor * (input - w)

    The error of a sample is the sum of the absolute (scaled) corrections.

    Public Properties:
        learning_rate:   Learning rate, clamped to [0, 1] (default 0.1)
        learning_radius: Neighborhood radius in grid units (default 7)
    """

    def __init__(self, network: DistanceNetwork, width: int | None = None, height: int | None = None):
        """
        Parameters:
            network: the network to train
            width:   grid width; inferred together with height when not given
            height:  grid height

        Raises:
            ValueError: if only one grid dimension is given, or the dimensions do not
                        match the number of neurons
                        (with inferred dimensions, the count must be a perfect square)
        """
        neurons_count = network.layers[0].neurons_count

        if (width is None) != (height is None):
            raise ValueError("Grid width and height must be given together.")

        if width is None:
            width = math.isqrt(neurons_count)
            height = width

        if width * height != neurons_count:
            raise ValueError("Invalid network size.")

        self._network: DistanceNetwork = network
        self._width  : int             = width
        self._height : int             = height

        self._learning_rate  : float = 0.1
        self._learning_radius: float = 7.0
        self._squared_radius2: float = 2 * 7 * 7

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def learning_rate(self) -> float:
        return self._learning_rate

    @learning_rate.setter
    def learning_rate(self, value: float) -> None:
        self._learning_rate = max(0.0, min(1.0, value))

    @property
    def learning_radius(self) -> float:
        return self._learning_radius

    @learning_radius.setter
    def learning_radius(self, value: float) -> None:
        self._learning_radius = max(0.0, value)
        self._squared_radius2 = 2 * self._learning_radius * self._learning_radius

    def run(self, inputs: Sequence[float]) -> float:
        """
        Run a learning iteration on a single sample.

        Returns:
            Sum of the absolute weight corrections
        """
        inputs = np.asarray(inputs, dtype=float)

        self._network.compute(inputs)
        winner = self._network.get_winner()
        layer  = self._network.layers[0]

        if self._learning_radius == 0:
            neuron = layer.neurons[winner]
            e = inputs - neuron.weights
            neuron.weights += e * self._learning_rate
            return float(np.sum(np.abs(e)))

        wx = winner % self._width
        wy = winner // self._width

        error = 0.0
        for j, neuron in enumerate(layer.neurons):
            dx = (j % self._width) - wx
            dy = (j // self._width) - wy
            factor = math.exp(-(dx * dx + dy * dy) / self._squared_radius2)

            e = (inputs - neuron.weights) * factor
            neuron.weights += e * self._learning_rate
            error += float(np.sum(np.abs(e)))

        return error
