"""
Resilient Back Propagation Learning Module

Classes:
    ResilientBackpropagationLearning: RProp, a batch sign-based gradient method
"""

import numpy as np
from typing import Sequence

from neuroforge.neuro         import ActivationNetwork
from neuroforge.learning.base import SupervisedLearning, forward_layers, derivatives, check_samples


class ResilientBackpropagationLearning(SupervisedLearning):
    """
    Resilient back propagation (RProp) learning algorithm.

    Only the sign of the error gradient is used. Every weight and threshold has
    its own step size, adapted by comparing the sign of the current gradient
    with the previous one (S = previous * current):

        S > 0:  step = min(step * ETA_PLUS,  DELTA_MAX); w -= sign(gradient) * step
        S < 0:  step = max(step * ETA_MINUS, DELTA_MIN); no move, previous gradient reset to 0
        S = 0:  w -= sign(gradient) * step

    run_epoch() accumulates the gradient over the whole batch before a single
    update; run() does the same for one sample.

    Public Properties:
        learning_rate: Initial step size of every weight (default 0.0125).
                       Setting it resets all step sizes.
    """

    DELTA_MAX = 50.0
    DELTA_MIN = 1e-6
    ETA_PLUS  = 1.2
    ETA_MINUS = 0.5

    def __init__(self, network: ActivationNetwork):
        """
        Parameters:
            network: the network to train
        """
        self._network      : ActivationNetwork = network
        self._learning_rate: float             = 0.0125

        layers = network.layers
        self._neuron_errors = [np.zeros(layer.neurons_count) for layer in layers]

        self._weights_derivatives         = [np.zeros((l.neurons_count, l.inputs_count)) for l in layers]
        self._weights_previous_derivatives = [np.zeros((l.neurons_count, l.inputs_count)) for l in layers]
        self._weights_updates             = [np.zeros((l.neurons_count, l.inputs_count)) for l in layers]

        self._thresholds_derivatives          = [np.zeros(l.neurons_count) for l in layers]
        self._thresholds_previous_derivatives = [np.zeros(l.neurons_count) for l in layers]
        self._thresholds_updates              = [np.zeros(l.neurons_count) for l in layers]

        self._reset_updates(self._learning_rate)

    @property
    def learning_rate(self) -> float:
        return self._learning_rate

    @learning_rate.setter
    def learning_rate(self, value: float) -> None:
        self._learning_rate = value
        self._reset_updates(value)

    def run(self, inputs: Sequence[float], desired: Sequence[float]) -> float:
        """
        Run a learning iteration on a single sample.

        Returns:
            Squared error of the sample, divided by 2
        """
        self._reset_gradient()

        error = self._accumulate(inputs, desired)
        self._update_network()

        return error

    def run_epoch(self, inputs: Sequence[Sequence[float]], outputs: Sequence[Sequence[float]]) -> float:
        """
        Run a learning epoch. The gradient is accumulated over all samples and
        the weights are updated once at the end.

        Returns:
            Sum of the per-sample errors (squared error divided by 2)
        """
        check_samples(inputs, outputs)
        self._reset_gradient()

        error = 0.0
        for sample_in, sample_out in zip(inputs, outputs):
            error += self._accumulate(sample_in, sample_out)

        self._update_network()
        return error

    def _accumulate(self, inputs: Sequence[float], desired: Sequence[float]) -> float:
        inputs = np.asarray(inputs, dtype=float)
        layer_outputs = forward_layers(self._network, inputs)

        error = self._calculate_error(np.asarray(desired, dtype=float), layer_outputs)
        self._calculate_gradient(inputs, layer_outputs)
        return error

    def _reset_updates(self, value: float) -> None:
        for updates in self._weights_updates:
            updates.fill(value)
        for updates in self._thresholds_updates:
            updates.fill(value)

    def _reset_gradient(self) -> None:
        for gradient in self._weights_derivatives:
            gradient.fill(0.0)
        for gradient in self._thresholds_derivatives:
            gradient.fill(0.0)

    def _calculate_error(self, desired: np.ndarray, layer_outputs: list[np.ndarray]) -> float:
        function = self._network.layers[0].neurons[0].activation_function

        output = layer_outputs[-1]
        e = output - desired
        self._neuron_errors[-1] = e * derivatives(function, output)
        error = float(np.sum(e * e))

        for j in range(self._network.layers_count - 2, -1, -1):
            next_weights = np.array([neuron.weights for neuron in self._network.layers[j + 1].neurons])
            back_sum = next_weights.T @ self._neuron_errors[j + 1]
            self._neuron_errors[j] = back_sum * derivatives(function, layer_outputs[j])

        return error / 2.0

    def _calculate_gradient(self, inputs: np.ndarray, layer_outputs: list[np.ndarray]) -> None:
        for j in range(self._network.layers_count):
            layer_input = inputs if j == 0 else layer_outputs[j - 1]
            self._weights_derivatives[j]    += np.outer(self._neuron_errors[j], layer_input)
            self._thresholds_derivatives[j] += self._neuron_errors[j]

    def _step(self, values: np.ndarray, gradient: np.ndarray, previous: np.ndarray, steps: np.ndarray) -> None:
        """Apply the RProp rule in place to one block of parameters."""
        same_sign = previous * gradient

        grow   = same_sign > 0
        shrink = same_sign < 0
        move   = ~shrink

        steps[grow]   = np.minimum(steps[grow] * self.ETA_PLUS, self.DELTA_MAX)
        steps[shrink] = np.maximum(steps[shrink] * self.ETA_MINUS, self.DELTA_MIN)

        values[move]   -= np.sign(gradient[move]) * steps[move]
        previous[move]  = gradient[move]
        previous[shrink] = 0.0

    def _update_network(self) -> None:
        for j, layer in enumerate(self._network.layers):
            for i, neuron in enumerate(layer.neurons):
                self._step(neuron.weights,
                           self._weights_derivatives[j][i],
                           self._weights_previous_derivatives[j][i],
                           self._weights_updates[j][i])

            thresholds = np.array([neuron.threshold for neuron in layer.neurons])
            self._step(thresholds,
                       self._thresholds_derivatives[j],
                       self._thresholds_previous_derivatives[j],
                       self._thresholds_updates[j])
            for neuron, threshold in zip(layer.neurons, thresholds):
                neuron.threshold = float(threshold)
