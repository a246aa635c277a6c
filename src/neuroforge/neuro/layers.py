"""
Layers Module

A layer is an ordered, fixed-size collection of neurons which all receive the
same input vector. Computing a layer assembles the outputs of its neurons into
a vector.

Classes:
    Layer:           Base class for all layers
    ActivationLayer: Layer of ActivationNeurons sharing an activation function
    DistanceLayer:   Layer of DistanceNeurons
"""

import numpy as np
from typing import Sequence

from neuroforge.core          import Range
from neuroforge.activations   import ActivationFunction
from neuroforge.neuro.neurons import Neuron, ActivationNeuron, DistanceNeuron


class Layer:
    """
    A layer of neurons.

    Public Attributes:
        neurons: The layer's neurons
        output:  Output vector of the last computation (None until computed)

    Public Properties:
        inputs_count:  Number of inputs of every neuron in the layer
        neurons_count: Number of neurons in the layer

    Public Methods:
        compute(inputs): Compute the output vector of the layer
        randomize():     Randomize all neurons of the layer
    """

    def __init__(self, neurons: list[Neuron], inputs_count: int):
        """
        Parameters:
            neurons:      the neurons making up the layer
            inputs_count: number of inputs of each neuron
        """
        self._inputs_count: int               = max(1, inputs_count)
        self.neurons      : list[Neuron]      = neurons
        self.output       : np.ndarray | None = None

    @property
    def inputs_count(self) -> int:
        """Number of inputs of the layer."""
        return self._inputs_count

    @property
    def neurons_count(self) -> int:
        """Number of neurons in the layer."""
        return len(self.neurons)

    def compute(self, inputs: Sequence[float]) -> np.ndarray:
        """
        Compute the output vector of the layer.

        Parameters:
            inputs: input vector, of length 'inputs_count'

        Returns:
            Vector with the output of each neuron (also cached in 'self.output')
        """
        output = np.array([neuron.compute(inputs) for neuron in self.neurons])
        self.output = output
        return output

    def randomize(self) -> None:
        """Randomize the weights of all neurons in the layer."""
        for neuron in self.neurons:
            neuron.randomize()

    def __repr__(self):
        return f"{type(self).__name__}(neurons_count={self.neurons_count}, inputs_count={self.inputs_count})"


class ActivationLayer(Layer):
    """
    A layer of activation neurons, all using the same activation function.
    """

    def __init__(self,
                 neurons_count: int,
                 inputs_count : int,
                 function     : ActivationFunction,
                 rng          : np.random.Generator | None = None,
                 weight_range : Range               | None = None):
        inputs_count = max(1, inputs_count)
        neurons = [ActivationNeuron(inputs_count, function, rng, weight_range)
                   for _ in range(max(1, neurons_count))]
        super().__init__(neurons, inputs_count)

    def set_activation_function(self, function: ActivationFunction) -> None:
        """Assign a new activation function to every neuron of the layer."""
        for neuron in self.neurons:
            neuron.activation_function = function


class DistanceLayer(Layer):
    """
    A layer of distance neurons.
    """

    def __init__(self,
                 neurons_count: int,
                 inputs_count : int,
                 rng          : np.random.Generator | None = None,
                 weight_range : Range               | None = None):
        inputs_count = max(1, inputs_count)
        neurons = [DistanceNeuron(inputs_count, rng, weight_range)
                   for _ in range(max(1, neurons_count))]
        super().__init__(neurons, inputs_count)
