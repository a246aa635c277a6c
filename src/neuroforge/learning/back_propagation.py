"""
Back Propagation Learning Module

Classes:
    BackPropagationLearning: Gradient descent with momentum for multi-layer activation networks
"""

import numpy as np
from typing import Sequence

from neuroforge.neuro         import ActivationNetwork
from neuroforge.learning.base import SupervisedLearning, forward_layers, derivatives


class BackPropagationLearning(SupervisedLearning):
    """
    Back propagation learning algorithm.

    Per-sample (online) gradient descent with momentum. Errors are propagated
    backwards from the output layer:

        output layer:  error[j] = (desired[j] - y[j]) * f'(y[j])
        hidden layer:  error[j] = sum_k(error_next[k] * weight_next[k][j]) * f'(y[j])

    and every weight and threshold moves by an update term which blends the
    previous update with the new gradient:

        update = learning_rate * momentum * update
               + learning_rate * (1 - momentum) * error[j] * input

    The activation function of the very first neuron is used for the whole
    network, so all neurons are expected to share it.

    Public Properties:
        learning_rate: Learning rate, clamped to [0, 1] (default 0.1)
        momentum:      Momentum, clamped to [0, 1] (default 0)
    """

    def __init__(self, network: ActivationNetwork):
        """
        Parameters:
            network: the network to train
        """
        self._network      : ActivationNetwork = network
        self._learning_rate: float             = 0.1
        self._momentum     : float             = 0.0

        # per layer: error vector, weight update matrix, threshold update vector
        self._neuron_errors      = [np.zeros(layer.neurons_count) for layer in network.layers]
        self._weights_updates    = [np.zeros((layer.neurons_count, layer.inputs_count)) for layer in network.layers]
        self._thresholds_updates = [np.zeros(layer.neurons_count) for layer in network.layers]

    @property
    def learning_rate(self) -> float:
        return self._learning_rate

    @learning_rate.setter
    def learning_rate(self, value: float) -> None:
        self._learning_rate = max(0.0, min(1.0, value))

    @property
    def momentum(self) -> float:
        return self._momentum

    @momentum.setter
    def momentum(self, value: float) -> None:
        self._momentum = max(0.0, min(1.0, value))

    def run(self, inputs: Sequence[float], desired: Sequence[float]) -> float:
        """
        Run a learning iteration on a single sample and update the weights.

        Returns:
            Squared error of the sample, divided by 2
        """
        inputs = np.asarray(inputs, dtype=float)
        layer_outputs = forward_layers(self._network, inputs)

        error = self._calculate_error(np.asarray(desired, dtype=float), layer_outputs)
        self._calculate_updates(inputs, layer_outputs)
        self._update_network()

        return error

    def _calculate_error(self, desired: np.ndarray, layer_outputs: list[np.ndarray]) -> float:
        function = self._network.layers[0].neurons[0].activation_function

        output = layer_outputs[-1]
        e = desired - output
        self._neuron_errors[-1] = e * derivatives(function, output)
        error = float(np.sum(e * e))

        for j in range(self._network.layers_count - 2, -1, -1):
            next_weights = np.array([neuron.weights for neuron in self._network.layers[j + 1].neurons])
            back_sum = next_weights.T @ self._neuron_errors[j + 1]
            self._neuron_errors[j] = back_sum * derivatives(function, layer_outputs[j])

        return error / 2.0

    def _calculate_updates(self, inputs: np.ndarray, layer_outputs: list[np.ndarray]) -> None:
        cached_momentum    = self._learning_rate * self._momentum
        cached_1m_momentum = self._learning_rate * (1.0 - self._momentum)

        for j in range(self._network.layers_count):
            layer_input = inputs if j == 0 else layer_outputs[j - 1]
            errors = self._neuron_errors[j]

            self._weights_updates[j] = (cached_momentum * self._weights_updates[j]
                                        + cached_1m_momentum * np.outer(errors, layer_input))
            self._thresholds_updates[j] = (cached_momentum * self._thresholds_updates[j]
                                           + cached_1m_momentum * errors)

    def _update_network(self) -> None:
        for j, layer in enumerate(self._network.layers):
            for i, neuron in enumerate(layer.neurons):
                neuron.weights   += self._weights_updates[j][i]
                neuron.threshold += float(self._thresholds_updates[j][i])
