"""
Elastic Network Learning Module

Classes:
    ElasticNetworkLearning: Elastic net learning for distance networks arranged on a ring
"""

import math
import numpy as np
from typing import Sequence

from neuroforge.neuro         import DistanceNetwork
from neuroforge.learning.base import UnsupervisedLearning


class ElasticNetworkLearning(UnsupervisedLearning):
    """
    Elastic network learning algorithm.

    Similar to SOM learning, but the neurons are arranged on a ring of radius
    0.5 instead of a grid (the classic elastic net for the traveling salesman
    problem). The squared distances between ring positions are precomputed
    once, indexed by |j - winner|:

        factor = exp(-distance[|j - winner|] / (2 * radius^2))
        w += learning_rate * factor * (input - w)

    Public Properties:
        learning_rate:   Learning rate, clamped to [0, 1] (default 0.1)
        learning_radius: Neighborhood radius, clamped to [0, 1] (default 0.5)
    """

    def __init__(self, network: DistanceNetwork):
        """
        Parameters:
            network: the network to train
        """
        self._network: DistanceNetwork = network

        self._learning_rate  : float = 0.1
        self._learning_radius: float = 0.5
        self._squared_radius2: float = 2 * 0.5 * 0.5

        neurons_count = network.layers[0].neurons_count
        delta_alpha   = math.pi * 2.0 / neurons_count

        self._distance = np.zeros(neurons_count)
        for i in range(1, neurons_count):
            alpha = delta_alpha * i
            dx = 0.5 * math.cos(alpha) - 0.5
            dy = 0.5 * math.sin(alpha)
            self._distance[i] = dx * dx + dy * dy

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
        self._learning_radius = max(0.0, min(1.0, value))
        self._squared_radius2 = 2 * self._learning_radius * self._learning_radius

    def _factor(self, distance: float) -> float:
        # zero radius: only the winner (distance 0) is pulled
        if self._squared_radius2 == 0:
            return 1.0 if distance == 0 else 0.0
        return math.exp(-distance / self._squared_radius2)

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

        error = 0.0
        for j, neuron in enumerate(layer.neurons):
            factor = self._factor(self._distance[abs(j - winner)])

            e = (inputs - neuron.weights) * factor
            neuron.weights += e * self._learning_rate
            error += float(np.sum(np.abs(e)))

        return error
