"""
Neuro Package

Feed-forward neural network computation graph: neurons, layers and networks.

Exported:
    Neuron, ActivationNeuron, DistanceNeuron
    Layer, ActivationLayer, DistanceLayer
    Network, ActivationNetwork, DistanceNetwork
"""

from neuroforge.neuro.neurons  import Neuron, ActivationNeuron, DistanceNeuron
from neuroforge.neuro.layers   import Layer, ActivationLayer, DistanceLayer
from neuroforge.neuro.networks import Network, ActivationNetwork, DistanceNetwork

__all__ = [
    'Neuron',
    'ActivationNeuron',
    'DistanceNeuron',
    'Layer',
    'ActivationLayer',
    'DistanceLayer',
    'Network',
    'ActivationNetwork',
    'DistanceNetwork',
]
