"""
Unit tests for the networks.
"""

import io
import pytest
import numpy as np

from neuroforge.core        import Range
from neuroforge.activations import SigmoidFunction, BipolarSigmoidFunction
from neuroforge.neuro       import Network, ActivationNetwork, DistanceNetwork


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def network(rng):
    """A 3-4-2 sigmoid network."""
    return ActivationNetwork(SigmoidFunction(2.0), 3, 4, 2, rng=rng, weight_range=Range(-1, 1))


# ============================================================================
# Test Construction
# ============================================================================

class TestActivationNetworkInit:
    """Test ActivationNetwork construction."""

    def test_layer_topology(self, network):
        assert network.inputs_count == 3
        assert network.layers_count == 2
        assert network.layers[0].inputs_count == 3
        assert network.layers[0].neurons_count == 4
        assert network.layers[1].inputs_count == 4
        assert network.layers[1].neurons_count == 2

    def test_no_layers(self, rng):
        with pytest.raises(ValueError):
            ActivationNetwork(SigmoidFunction(), 2, rng=rng)

    def test_set_activation_function(self, network):
        function = BipolarSigmoidFunction()
        network.set_activation_function(function)
        for layer in network.layers:
            assert all(n.activation_function is function for n in layer.neurons)

    def test_seeded_networks_are_identical(self):
        n1 = ActivationNetwork(SigmoidFunction(), 2, 3, 1, rng=np.random.default_rng(1))
        n2 = ActivationNetwork(SigmoidFunction(), 2, 3, 1, rng=np.random.default_rng(1))
        np.testing.assert_array_equal(n1.compute([0.5, 0.5]), n2.compute([0.5, 0.5]))


# ============================================================================
# Test Computation
# ============================================================================

class TestCompute:
    """Test the forward pass."""

    def test_output_length_equals_last_layer(self, network):
        assert network.compute([0.1, 0.2, 0.3]).shape == (2,)

    def test_output_cached(self, network):
        assert network.output is None
        output = network.compute([0.1, 0.2, 0.3])
        np.testing.assert_array_equal(network.output, output)

    def test_layers_chained(self, network):
        """Test that each layer's output is the next layer's input."""
        inputs = [0.1, 0.2, 0.3]
        hidden = network.layers[0].compute(inputs)
        expected = network.layers[1].compute(hidden)
        np.testing.assert_allclose(network.compute(inputs), expected)

    def test_wrong_input_length(self, network):
        with pytest.raises(ValueError):
            network.compute([0.1, 0.2])

    def test_randomize_changes_output(self, network):
        before = network.compute([0.1, 0.2, 0.3]).copy()
        network.randomize()
        assert not np.array_equal(before, network.compute([0.1, 0.2, 0.3]))


class TestDistanceNetwork:
    """Test DistanceNetwork."""

    def test_single_layer(self, rng):
        network = DistanceNetwork(2, 9, rng)
        assert network.layers_count == 1
        assert network.layers[0].neurons_count == 9

    def test_get_winner(self, rng):
        network = DistanceNetwork(2, 3, rng)
        for i, neuron in enumerate(network.layers[0].neurons):
            neuron.weights[:] = [float(i), float(i)]

        network.compute([1.9, 2.1])
        assert network.get_winner() == 2

    def test_get_winner_lowest_index_on_ties(self, rng):
        network = DistanceNetwork(1, 3, rng)
        for neuron in network.layers[0].neurons:
            neuron.weights[:] = [0.5]

        network.compute([0.0])
        assert network.get_winner() == 0

    def test_get_winner_before_compute(self, rng):
        with pytest.raises(RuntimeError):
            DistanceNetwork(2, 3, rng).get_winner()


# ============================================================================
# Test Persistence
# ============================================================================

class TestSaveLoad:
    """Test Network.save() and Network.load()."""

    def test_round_trip_stream(self, network):
        inputs = [0.4, -0.2, 0.9]
        expected = network.compute(inputs).copy()

        buffer = io.BytesIO()
        network.save(buffer)
        buffer.seek(0)
        restored = Network.load(buffer)

        assert isinstance(restored, ActivationNetwork)
        np.testing.assert_array_equal(restored.output, expected)
        np.testing.assert_allclose(restored.compute(inputs), expected)

    def test_round_trip_file(self, network, tmp_path):
        path = str(tmp_path / "network.joblib")
        network.save(path)
        restored = Network.load(path)

        assert restored.layers_count == network.layers_count
        for layer, restored_layer in zip(network.layers, restored.layers):
            for neuron, restored_neuron in zip(layer.neurons, restored_layer.neurons):
                np.testing.assert_array_equal(neuron.weights, restored_neuron.weights)
                assert neuron.threshold == restored_neuron.threshold
                assert restored_neuron.activation_function.alpha == 2.0

    def test_load_rejects_other_objects(self, tmp_path):
        import joblib  # type: ignore
        path = str(tmp_path / "other.joblib")
        joblib.dump({"not": "a network"}, path)
        with pytest.raises(ValueError):
            Network.load(path)


# ============================================================================
# Test Visualization
# ============================================================================

class TestVisualize:
    """Test Network.visualize() (no rendering)."""

    def test_graph_contains_nodes_and_edges(self, network):
        dot = network.visualize()
        source = dot.source

        for i in range(3):
            assert f"x{i}" in source
        assert "l0n3" in source
        assert "l1n1" in source
        assert "x0 -> l0n0" in source
        assert "l0n0 -> l1n0" in source

    def test_edge_count(self, network):
        source = network.visualize().source
        assert source.count("->") == 3 * 4 + 4 * 2
