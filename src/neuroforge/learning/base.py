"""
Learning Base Module

This module defines the interfaces shared by all learning algorithms, plus a
few helpers used by the gradient based ones.

Classes:
    SupervisedLearning:   Learning from (input, desired output) samples
    UnsupervisedLearning: Learning from inputs only

Functions:
    forward_layers: Forward pass returning the output vector of every layer
"""

import logging
import numpy as np
from abc    import ABC, abstractmethod
from typing import Sequence

from neuroforge.activations import ActivationFunction
from neuroforge.neuro       import Network

logger = logging.getLogger(__name__)


def forward_layers(network: Network, inputs: Sequence[float]) -> list[np.ndarray]:
    """
    Compute the network, keeping the output vector of every layer.

    Learning algorithms use the returned vectors rather than the output caches
    of neurons and layers.

    Parameters:
        network: the network to compute
        inputs:  input vector

    Returns:
        List with the output vector of each layer, in layer order
    """
    outputs = []
    signal  = np.asarray(inputs, dtype=float)
    for layer in network.layers:
        signal = layer.compute(signal)
        outputs.append(signal)
    network.output = signal
    return outputs


def derivatives(function: ActivationFunction, outputs: np.ndarray) -> np.ndarray:
    """Activation function derivative for each value of an output vector."""
    return np.array([function.derivative2(y) for y in outputs], dtype=float)


def check_samples(inputs: Sequence, outputs: Sequence) -> None:
    """Validate that a batch has the same number of inputs and desired outputs."""
    if len(inputs) != len(outputs):
        raise ValueError(f"Got {len(inputs)} input samples but {len(outputs)} output samples")


class SupervisedLearning(ABC):
    """
    Abstract supervised learning algorithm.

    Public Methods:
        run(inputs, desired):      Run one learning iteration on a single sample
        run_epoch(inputs, outputs): Run one learning iteration on every sample of a batch
    """

    @abstractmethod
    def run(self, inputs: Sequence[float], desired: Sequence[float]) -> float:
        """
        Run a learning iteration on a single sample.

        Parameters:
            inputs:  input vector
            desired: desired output vector

        Returns:
            The learning error of the sample (algorithm specific measure)
        """
        pass

    def run_epoch(self, inputs: Sequence[Sequence[float]], outputs: Sequence[Sequence[float]]) -> float:
        """
        Run a learning epoch: one call to run() for each sample, in the given order.

        Parameters:
            inputs:  input vectors
            outputs: desired output vectors

        Returns:
            Sum of the errors returned by run()
        """
        check_samples(inputs, outputs)

        error = 0.0
        for sample_in, sample_out in zip(inputs, outputs):
            error += self.run(sample_in, sample_out)

        logger.debug("%s epoch error: %.6f", type(self).__name__, error)
        return error


class UnsupervisedLearning(ABC):
    """
    Abstract unsupervised learning algorithm.

    Public Methods:
        run(inputs):       Run one learning iteration on a single sample
        run_epoch(inputs): Run one learning iteration on every sample of a batch
    """

    @abstractmethod
    def run(self, inputs: Sequence[float]) -> float:
        pass

    def run_epoch(self, inputs: Sequence[Sequence[float]]) -> float:
        """
        Run a learning epoch over all samples, in the given order.

        Returns:
            Sum of the errors returned by run()
        """
        error = 0.0
        for sample in inputs:
            error += self.run(sample)

        logger.debug("%s epoch error: %.6f", type(self).__name__, error)
        return error
