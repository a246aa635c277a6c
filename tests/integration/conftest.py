"""
Shared fixtures for integration tests.
"""

import pytest
import numpy as np

from neuroforge.core        import Range
from neuroforge.activations import SigmoidFunction
from neuroforge.neuro       import ActivationNetwork


@pytest.fixture
def seeds():
    """Seeds of the independent runs of the convergence tests."""
    return [1, 2, 3, 4, 5]


@pytest.fixture
def xor_network_factory():
    """Build a 2-4-1 sigmoid network with weights in [-1, 1]."""
    def make(seed):
        return ActivationNetwork(SigmoidFunction(2.0), 2, 4, 1,
                                 rng=np.random.default_rng(seed),
                                 weight_range=Range(-1, 1))
    return make
