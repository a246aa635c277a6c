"""
Networks Module

This module implements feed-forward neural networks as ordered sequences of
layers: the output of layer i is the input of layer i+1, and the output of the
last layer is the output of the network. Only the forward pass lives here;
training is the job of the learning algorithms, which modify the neurons'
weights directly.

Classes:
    Network:           Base class (forward pass, randomization, persistence, visualization)
    ActivationNetwork: Multi-layer network of activation neurons
    DistanceNetwork:   Single-layer network of distance neurons (competitive learning)
"""

import joblib    # type: ignore
import graphviz  # type: ignore
import numpy as np
from typing import IO, Sequence

from neuroforge.core         import Range
from neuroforge.activations  import ActivationFunction
from neuroforge.neuro.layers import Layer, ActivationLayer, DistanceLayer


class Network:
    """
    Base class of all feed-forward networks.

    Invariant: the inputs count of layer i equals the neurons count of layer i-1
    (the inputs count of layer 0 equals the network's inputs count).

    The 'output' attribute caches the result of the last compute() call. It is
    unsynchronized shared state; concurrent callers must use the returned vector.

    Public Attributes:
        layers: The network's layers, in computation order
        output: Output vector of the last computation (None until computed)

    Public Properties:
        inputs_count: Number of inputs of the network
        layers_count: Number of layers

    Public Methods:
        compute(inputs):  Compute the network's output vector
        randomize():      Randomize all weights of the network
        save(target):     Persist the network to a file path or binary stream
        load(source):     Restore a network saved by save() (static)
        visualize(view):  Render the network topology with Graphviz
    """

    def __init__(self, inputs_count: int, layers: list[Layer]):
        """
        Parameters:
            inputs_count: number of inputs of the network
            layers:       the layers of the network, in computation order
        """
        self._inputs_count: int               = max(1, inputs_count)
        self.layers       : list[Layer]       = layers
        self.output       : np.ndarray | None = None

    @property
    def inputs_count(self) -> int:
        """Number of inputs of the network."""
        return self._inputs_count

    @property
    def layers_count(self) -> int:
        """Number of layers of the network."""
        return len(self.layers)

    def compute(self, inputs: Sequence[float]) -> np.ndarray:
        """
        Compute the output vector of the network.

        Parameters:
            inputs: input vector, of length 'inputs_count'

        Returns:
            The output of the last layer (also cached in 'self.output')

        Raises:
            ValueError: if the input vector has the wrong length
        """
        output = np.asarray(inputs, dtype=float)
        for layer in self.layers:
            output = layer.compute(output)

        self.output = output
        return output

    def randomize(self) -> None:
        """Randomize the weights (and thresholds) of every neuron."""
        for layer in self.layers:
            layer.randomize()

    def save(self, target: 'str | IO[bytes]') -> None:
        """
        Save the complete network (topology, weights, thresholds, activation
        functions and output caches).

        Parameters:
            target: file path or writable binary stream
        """
        joblib.dump(self, target)

    @staticmethod
    def load(source: 'str | IO[bytes]') -> 'Network':
        """
        Load a network previously stored with save().

        Parameters:
            source: file path or readable binary stream

        Returns:
            The restored network
        """
        network = joblib.load(source)
        if not isinstance(network, Network):
            raise ValueError(f"Stored object is not a Network but {type(network).__name__}")
        return network

    def visualize(self, view: bool = False) -> graphviz.Digraph:
        """
        Visualize the network using Graphviz.

        Input nodes are drawn on the left, followed by one cluster per layer.
        Every edge is labelled with the corresponding weight.

        Parameters:
            view: If True, automatically open the visualization after rendering

        Returns:
            graphviz.Digraph object representing the network
        """
        dot = graphviz.Digraph()
        dot.attr(rankdir='LR')  # Left to right layout
        dot.attr('graph', labelloc='t')

        base_attrs = {'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5',
                      'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'}

        with dot.subgraph(name='cluster_input') as input_cluster:
            input_cluster.attr(rank='source', label='Inputs', style='invisible')
            for i in range(self.inputs_count):
                input_cluster.node(f"x{i}", label=f"x{i}", fillcolor='lightgrey', **base_attrs)

        prev_ids = [f"x{i}" for i in range(self.inputs_count)]
        for l, layer in enumerate(self.layers):
            is_last   = l == self.layers_count - 1
            fillcolor = 'white' if is_last else 'lightblue'
            node_ids  = [f"l{l}n{n}" for n in range(layer.neurons_count)]

            with dot.subgraph(name=f'cluster_layer{l}') as layer_cluster:
                layer_cluster.attr(rank='sink' if is_last else 'same', label=f'Layer {l}', style='invisible')
                for node_id, neuron in zip(node_ids, layer.neurons):
                    label = node_id
                    threshold = getattr(neuron, 'threshold', None)
                    if threshold is not None:
                        label += f"\\nt={threshold:.2f}"
                    layer_cluster.node(node_id, label=label, fillcolor=fillcolor, **base_attrs)

            for node_id, neuron in zip(node_ids, layer.neurons):
                for prev_id, weight in zip(prev_ids, neuron.weights):
                    dot.edge(prev_id, node_id, label=f"w={weight:.2f}",
                             fontsize='5', penwidth='0.5', arrowsize='0.5')
            prev_ids = node_ids

        if view:
            dot.view(cleanup=True)

        return dot

    def __repr__(self):
        sizes = ", ".join(str(layer.neurons_count) for layer in self.layers)
        return f"{type(self).__name__}(inputs_count={self.inputs_count}, layers=[{sizes}])"


class ActivationNetwork(Network):
    """
    Multi-layer feed-forward network of activation neurons.

    Example:
        >>> network = ActivationNetwork(SigmoidFunction(2), 2, 2, 1)  # 2 inputs, 2 hidden, 1 output
        >>> network.compute([0.0, 1.0])
    """

    def __init__(self,
                 function    : ActivationFunction,
                 inputs_count: int,
                 *neurons_count: int,
                 rng         : np.random.Generator | None = None,
                 weight_range: Range               | None = None):
        """
        Parameters:
            function:      activation function of every neuron
            inputs_count:  number of inputs of the network
            neurons_count: number of neurons in each layer (at least one layer)
            rng:           random generator shared by all neurons; process-seeded if None
            weight_range:  range of the random initial weights; [0, 1] if None
        """
        if not neurons_count:
            raise ValueError("A network needs at least one layer.")

        inputs_count = max(1, inputs_count)
        rng = rng if rng is not None else np.random.default_rng()

        layers: list[Layer] = []
        for i, count in enumerate(neurons_count):
            layer_inputs = inputs_count if i == 0 else layers[i - 1].neurons_count
            layers.append(ActivationLayer(count, layer_inputs, function, rng, weight_range))

        super().__init__(inputs_count, layers)

    def set_activation_function(self, function: ActivationFunction) -> None:
        """Assign a new activation function to every neuron of the network."""
        for layer in self.layers:
            layer.set_activation_function(function)


class DistanceNetwork(Network):
    """
    Single-layer network of distance neurons, used for competitive learning.

    Public Methods:
        get_winner(): Index of the neuron with the smallest output
    """

    def __init__(self,
                 inputs_count : int,
                 neurons_count: int,
                 rng          : np.random.Generator | None = None,
                 weight_range : Range               | None = None):
        """
        Parameters:
            inputs_count:  number of inputs of the network
            neurons_count: number of neurons in the only layer
            rng:           random generator shared by all neurons
            weight_range:  range of the random initial weights
        """
        inputs_count = max(1, inputs_count)
        super().__init__(inputs_count, [DistanceLayer(neurons_count, inputs_count, rng, weight_range)])

    def get_winner(self) -> int:
        """
        Get the winner neuron: the one whose weights are closest to the last input.
        On ties the lowest index wins.

        Returns:
            Index of the winner neuron in the network's only layer

        Raises:
            RuntimeError: if the network has not computed anything yet
        """
        if self.output is None:
            raise RuntimeError("The network has not been computed yet")
        return int(np.argmin(self.output))
