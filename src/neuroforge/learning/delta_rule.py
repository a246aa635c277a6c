"""
Delta Rule Learning Module

Classes:
    DeltaRuleLearning: Delta rule for single-layer networks with continuous activation
"""

import numpy as np
from typing import Sequence

from neuroforge.neuro         import ActivationNetwork
from neuroforge.learning.base import SupervisedLearning


class DeltaRuleLearning(SupervisedLearning):
    """
    Delta rule learning algorithm.

    Trains a single-layer activation network with a differentiable activation
    function (sigmoid, bipolar sigmoid). With e = desired - actual:

        weight[i] += learning_rate * e * f'(actual) * input[i]
        threshold += learning_rate * e * f'(actual)

    The error of a sample is sum(e^2) / 2.

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

        # all neurons of the layer are assumed to share one activation function
        function = layer.neurons[0].activation_function

        error = 0.0
        for j, neuron in enumerate(layer.neurons):
            e = desired[j] - network_output[j]
            function_derivative = function.derivative2(network_output[j])

            neuron.weights   += self._learning_rate * e * function_derivative * inputs
            neuron.threshold += self._learning_rate * e * function_derivative

            error += e * e

        return float(error / 2)
