"""
Perceptron Learning Module

Classes:
    PerceptronLearning: Perceptron learning rule for single-layer threshold networks
"""

import numpy as np
from typing import Sequence

from neuroforge.neuro               import ActivationNetwork
from neuroforge.learning.base       import SupervisedLearning


class PerceptronLearning(SupervisedLearning):
    """
    Perceptron learning algorithm.

    Trains a single-layer activation network, normally using the threshold
    activation function. For every output neuron whose actual output differs
    from the desired one:

        weight[i] += learning_rate * (desired - actual) * input[i]
        threshold += learning_rate * (desired - actual)

    The error of a sample is the sum of |desired - actual| over the output neurons.

    Public Properties:
        learning_rate: Learning rate, clamped to [0, 1] (default 0.1)
    """

    def __init__(self, network: ActivationNetwork):
        """
        Parameters:
            network: the network to train, it must have exactly one layer

        Raises:
            ValueError: if the network has more than one layer
        """
        if network.layers_count != 1:
            raise ValueError("Invalid neural network. It should have one layer only.")

        self._network      : ActivationNetwork = network
        self._learning_rate: float             = 0.1

    @property
    def learning_rate(self) -> float:
        return self._learning_rate

    @learning_rate.setter
    def learning_rate(self, value: float) -> None:
        self._learning_rate = max(0.0, min(1.0, value))

    def run(self, inputs: Sequence[float], desired: Sequence[float]) -> float:
        inputs = np.asarray(inputs, dtype=float)
        network_output = self._network.compute(inputs)
        layer = self._network.layers[0]

        error = 0.0
        for j, perceptron in enumerate(layer.neurons):
            e = desired[j] - network_output[j]
            if e != 0:
                perceptron.weights   += self._learning_rate * e * inputs
                perceptron.threshold += self._learning_rate * e
                error += abs(e)

        return float(error)
