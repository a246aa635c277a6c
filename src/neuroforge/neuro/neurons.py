"""
Neurons Module

This module implements the neurons, the elementary computation units of the
networks. A neuron owns a fixed-length weight vector and computes a scalar
output from an input vector of the same length.

Classes:
    Neuron:           Abstract base class holding weights and the output cache
    ActivationNeuron: output = activation(threshold + sum(weight[i] * input[i]))
    DistanceNeuron:   output = sum(|weight[i] - input[i]|)  (L1 distance)
"""

import numpy as np
from abc    import ABC, abstractmethod
from typing import Sequence

from neuroforge.core        import Range
from neuroforge.activations import ActivationFunction

DEFAULT_WEIGHT_RANGE = Range(0.0, 1.0)


class Neuron(ABC):
    """
    Abstract neuron.

    The length of the weight vector is fixed at construction time and never
    changes; learning algorithms modify the weights in place.

    The 'output' attribute caches the value returned by the most recent call to
    compute(). It is shared mutable state: callers computing concurrently from
    several threads must use the returned value instead.

    Public Attributes:
        weights:      The neuron's weights (numpy array of length 'inputs_count')
        output:       Output of the last computation (None until computed)
        weight_range: Range from which randomize() draws the weights

    Public Properties:
        inputs_count: Number of inputs (and weights) of the neuron

    Public Methods:
        randomize():     Draw new random weights from 'weight_range'
        compute(inputs): Compute the neuron's output
    """

    def __init__(self,
                 inputs_count: int,
                 rng         : np.random.Generator | None = None,
                 weight_range: Range               | None = None):
        """
        Parameters:
            inputs_count: number of inputs, at least 1
            rng:          random generator used by randomize(); process-seeded if None
            weight_range: range of the random weights; [0, 1] if None
        """
        self._inputs_count: int = max(1, inputs_count)
        self._rng = rng if rng is not None else np.random.default_rng()

        self.weight_range: Range        = weight_range if weight_range is not None else DEFAULT_WEIGHT_RANGE
        self.weights     : np.ndarray   = np.zeros(self._inputs_count)
        self.output      : float | None = None

        self.randomize()

    @property
    def inputs_count(self) -> int:
        """Number of inputs of the neuron."""
        return self._inputs_count

    def randomize(self) -> None:
        """
        Randomize the weights, drawing each one uniformly from 'weight_range'.
        """
        self.weights[:] = self._rng.random(self._inputs_count) * self.weight_range.length + self.weight_range.min

    def _check_inputs(self, inputs: Sequence[float]) -> np.ndarray:
        inputs = np.asarray(inputs, dtype=float)
        if inputs.shape != (self._inputs_count,):
            raise ValueError("Wrong length of the input vector.")
        return inputs

    @abstractmethod
    def compute(self, inputs: Sequence[float]) -> float:
        """
        Compute the output of the neuron.

        Parameters:
            inputs: input vector, of length 'inputs_count'

        Returns:
            The neuron's output (also cached in 'self.output')

        Raises:
            ValueError: if the input vector has the wrong length
        """
        pass


class ActivationNeuron(Neuron):
    """
    Neuron computing a weighted sum of its inputs, plus a threshold (bias),
    passed through an activation function:

        output = function(threshold + sum(weight[i] * input[i]))

    Public Attributes:
        threshold:           Bias added to the weighted sum
        activation_function: The neuron's activation function
    """

    def __init__(self,
                 inputs_count: int,
                 function    : ActivationFunction,
                 rng         : np.random.Generator | None = None,
                 weight_range: Range               | None = None):
        """
        Parameters:
            inputs_count: number of inputs
            function:     activation function of the neuron
            rng:          random generator used by randomize()
            weight_range: range of the random weights and threshold
        """
        self.threshold          : float              = 0.0
        self.activation_function: ActivationFunction = function
        super().__init__(inputs_count, rng, weight_range)

    def randomize(self) -> None:
        """
        Randomize the weights and the threshold.
        """
        super().randomize()
        self.threshold = float(self._rng.random() * self.weight_range.length + self.weight_range.min)

    def compute(self, inputs: Sequence[float]) -> float:
        inputs = self._check_inputs(inputs)

        total  = float(np.dot(self.weights, inputs)) + self.threshold
        output = float(self.activation_function.function(total))

        self.output = output
        return output

    def __repr__(self):
        return (f"ActivationNeuron(inputs_count={self.inputs_count}, "
                f"function={self.activation_function!r}, threshold={self.threshold})")


class DistanceNeuron(Neuron):
    """
    Neuron computing the L1 (Manhattan) distance between its weights and the
    input vector. Used by competitive learning networks (SOM, elastic net),
    where the neuron with the smallest output is the winner.
    """

    def compute(self, inputs: Sequence[float]) -> float:
        inputs = self._check_inputs(inputs)

        output = float(np.sum(np.abs(self.weights - inputs)))

        self.output = output
        return output

    def __repr__(self):
        return f"DistanceNeuron(inputs_count={self.inputs_count})"
