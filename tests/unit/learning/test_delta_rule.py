"""
Unit tests for DeltaRuleLearning.
"""

import pytest
import numpy as np

from neuroforge.activations import SigmoidFunction
from neuroforge.neuro       import ActivationNetwork
from neuroforge.learning    import DeltaRuleLearning


@pytest.fixture
def network(rng):
    return ActivationNetwork(SigmoidFunction(2.0), 2, 1, rng=rng)


class TestDeltaRuleInit:
    """Test construction and properties."""

    def test_rejects_multi_layer_networks(self, rng):
        with pytest.raises(ValueError):
            DeltaRuleLearning(ActivationNetwork(SigmoidFunction(), 2, 2, 1, rng=rng))

    def test_learning_rate(self, network):
        learning = DeltaRuleLearning(network)
        assert learning.learning_rate == 0.1
        learning.learning_rate = 2.0
        assert learning.learning_rate == 1.0


class TestDeltaRuleRun:
    """Test the update rule."""

    def test_update_rule(self, network):
        neuron = network.layers[0].neurons[0]
        neuron.weights[:] = [0.0, 0.0]
        neuron.threshold = 0.0

        learning = DeltaRuleLearning(network)
        learning.learning_rate = 0.5

        # output of a zero-weight sigmoid is 0.5, derivative 2 * 0.5 * 0.5 = 0.5
        error = learning.run([1.0, 2.0], [1.0])

        e, d = 0.5, 0.5
        assert error == pytest.approx(e * e / 2)
        np.testing.assert_allclose(neuron.weights, [0.5 * e * d * 1.0, 0.5 * e * d * 2.0])
        assert neuron.threshold == pytest.approx(0.5 * e * d)

    def test_error_decreases(self, network):
        learning = DeltaRuleLearning(network)
        learning.learning_rate = 0.5

        inputs  = [[0, 0], [0, 1], [1, 0], [1, 1]]
        outputs = [[0], [1], [1], [1]]
        first = learning.run_epoch(inputs, outputs)
        for _ in range(200):
            last = learning.run_epoch(inputs, outputs)
        assert last < first
