"""
Unit tests for ElasticNetworkLearning.
"""

import math
import pytest
import numpy as np

from neuroforge.neuro    import DistanceNetwork
from neuroforge.learning import ElasticNetworkLearning


class TestElasticInit:
    """Test the ring distances and properties."""

    def test_distance_table(self, rng):
        learning = ElasticNetworkLearning(DistanceNetwork(2, 4, rng))
        # ring of radius 0.5: neighbors at 90 degrees, opposite at 180 degrees
        np.testing.assert_allclose(learning._distance, [0.0, 0.5, 1.0, 0.5], atol=1e-12)

    def test_defaults(self, rng):
        learning = ElasticNetworkLearning(DistanceNetwork(2, 4, rng))
        assert learning.learning_rate == 0.1
        assert learning.learning_radius == 0.5

    def test_rate_and_radius_are_independent(self, rng):
        learning = ElasticNetworkLearning(DistanceNetwork(2, 4, rng))
        learning.learning_rate = 0.3
        assert learning.learning_rate == 0.3
        assert learning.learning_radius == 0.5

        learning.learning_radius = 0.7
        assert learning.learning_rate == 0.3
        assert learning.learning_radius == 0.7

    def test_clamping(self, rng):
        learning = ElasticNetworkLearning(DistanceNetwork(2, 4, rng))
        learning.learning_rate = 2.0
        learning.learning_radius = -1.0
        assert learning.learning_rate == 1.0
        assert learning.learning_radius == 0.0


class TestElasticRun:
    """Test the update rule."""

    def test_ring_neighborhood(self, rng):
        network = DistanceNetwork(1, 4, rng)
        for neuron in network.layers[0].neurons:
            neuron.weights[:] = [1.0]
        network.layers[0].neurons[0].weights[:] = [0.0]

        learning = ElasticNetworkLearning(network)
        learning.learning_rate = 1.0

        error = learning.run([0.0])

        # 2 * radius^2 = 0.5
        f1 = math.exp(-0.5 / 0.5)
        f2 = math.exp(-1.0 / 0.5)
        weights = [n.weights[0] for n in network.layers[0].neurons]
        assert weights == pytest.approx([0.0, 1 - f1, 1 - f2, 1 - f1])
        assert error == pytest.approx(2 * f1 + f2)

    def test_zero_radius_moves_winner_only(self, rng):
        network = DistanceNetwork(1, 3, rng)
        for i, neuron in enumerate(network.layers[0].neurons):
            neuron.weights[:] = [float(i)]

        learning = ElasticNetworkLearning(network)
        learning.learning_radius = 0.0
        learning.learning_rate = 0.5

        learning.run([1.2])

        weights = [n.weights[0] for n in network.layers[0].neurons]
        assert weights == pytest.approx([0.0, 1.1, 2.0])
