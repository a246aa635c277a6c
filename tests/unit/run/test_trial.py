"""
Unit tests for Trial, SupervisedTrial and UnsupervisedTrial.
"""

import logging
import pytest
import numpy as np

from neuroforge.neuro      import ActivationNetwork, DistanceNetwork
from neuroforge.pool       import RankSelection
from neuroforge.learning   import (BackPropagationLearning, EvolutionaryLearning,
                                   PerceptronLearning, SOMLearning)
from neuroforge.run.config import Config
from neuroforge.run.trial  import (Trial, SupervisedTrial, UnsupervisedTrial,
                                   build_network, build_learning, build_selection)


# ============================================================================
# Fixtures
# ============================================================================

@pytest.fixture
def config():
    """A small default configuration."""
    config = Config()
    config.max_epochs = 5
    config.seed = 3
    return config


@pytest.fixture
def som_config():
    config = Config()
    config.network_type = 'distance'
    config.layers = [4]
    config.algorithm = 'som'
    config.learning_radius = 1.0
    config.max_epochs = 3
    config.seed = 3
    return config


# ============================================================================
# Test Builders
# ============================================================================

class TestBuilders:
    """Test building networks and learning algorithms from a Config."""

    def test_build_activation_network(self, config):
        """Test that layer sizes and activation come from the config."""
        config.activation = 'bipolar_sigmoid'
        network = build_network(config, np.random.default_rng(0))

        assert isinstance(network, ActivationNetwork)
        assert network.inputs_count == 2
        assert [layer.neurons_count for layer in network.layers] == [2, 1]
        assert network.layers[0].neurons[0].activation_function.name == 'bipolar_sigmoid'

    def test_build_distance_network(self, som_config):
        network = build_network(som_config, np.random.default_rng(0))
        assert isinstance(network, DistanceNetwork)
        assert network.layers[0].neurons_count == 4

    def test_weights_within_range(self, config):
        config.weight_min, config.weight_max = 0.2, 0.3
        network = build_network(config, np.random.default_rng(0))
        for layer in network.layers:
            for neuron in layer.neurons:
                assert np.all((neuron.weights >= 0.2) & (neuron.weights <= 0.3))

    def test_build_back_propagation(self, config):
        """Test that rates are applied to the algorithm."""
        config.learning_rate = 0.4
        config.momentum = 0.6
        network = build_network(config)
        learning = build_learning(config, network)

        assert isinstance(learning, BackPropagationLearning)
        assert learning.learning_rate == 0.4
        assert learning.momentum == 0.6

    def test_unset_learning_rate_keeps_default(self, config):
        config.algorithm = 'perceptron'
        config.learning_rate = None
        config.layers = [1]
        learning = build_learning(config, build_network(config))

        assert isinstance(learning, PerceptronLearning)
        assert learning.learning_rate == 0.1

    def test_build_som(self, som_config):
        learning = build_learning(som_config, build_network(som_config))
        assert isinstance(learning, SOMLearning)
        assert learning.learning_radius == 1.0

    def test_build_evolutionary(self, config):
        config.algorithm = 'evolutionary'
        config.selection = 'rank'
        config.population_size = 12
        learning = build_learning(config, build_network(config), np.random.default_rng(0))

        assert isinstance(learning, EvolutionaryLearning)
        assert isinstance(learning._selection_method, RankSelection)

    def test_build_selection_invalid(self, config):
        config.selection = 'tournament'
        with pytest.raises(ValueError):
            build_selection(config)

    def test_algorithm_network_mismatch(self, config, som_config):
        """Test that supervised algorithms need activation networks and vice versa."""
        with pytest.raises(ValueError):
            build_learning(config, build_network(som_config))
        with pytest.raises(ValueError):
            build_learning(som_config, build_network(config))


# ============================================================================
# Test Supervised Trials
# ============================================================================

class TestSupervisedTrial:
    """Test the supervised training loop."""

    def test_unsupervised_algorithm_rejected(self, som_config, xor_samples):
        inputs, outputs = xor_samples
        with pytest.raises(ValueError):
            SupervisedTrial(inputs, outputs, som_config)

    def test_sample_count_mismatch(self, config, xor_samples):
        inputs, outputs = xor_samples
        with pytest.raises(ValueError):
            SupervisedTrial(inputs, outputs[:2], config)

    def test_runs_max_epochs(self, config, xor_samples):
        """Test that without threshold the trial runs every epoch and succeeds."""
        inputs, outputs = xor_samples
        trial = SupervisedTrial(inputs, outputs, config, suppress_output=True)
        trial.run()

        assert trial.epoch_counter == 5
        assert len(trial.errors) == 5
        assert trial.failed is False
        assert isinstance(trial.network, ActivationNetwork)

    def test_threshold_reached(self, config, xor_samples):
        """Test early termination once the error falls below the threshold."""
        config.error_threshold = 1e9
        inputs, outputs = xor_samples
        trial = SupervisedTrial(inputs, outputs, config, suppress_output=True)
        trial.run()

        assert trial.epoch_counter == 1
        assert trial.failed is False

    def test_threshold_not_reached(self, config, xor_samples):
        """Test that a trial missing the threshold is marked failed."""
        config.error_threshold = -1.0
        inputs, outputs = xor_samples
        trial = SupervisedTrial(inputs, outputs, config, suppress_output=True)
        trial.run()

        assert trial.epoch_counter == 5
        assert trial.failed is True

    def test_seeded_trials_are_reproducible(self, config, xor_samples):
        inputs, outputs = xor_samples
        first = SupervisedTrial(inputs, outputs, config, suppress_output=True)
        second = SupervisedTrial(inputs, outputs, config, suppress_output=True)
        first.run()
        second.run()

        assert first.errors == second.errors

    def test_run_resets_state(self, config, xor_samples):
        """Test that running a trial twice starts from scratch."""
        inputs, outputs = xor_samples
        trial = SupervisedTrial(inputs, outputs, config, suppress_output=True)
        trial.run()
        first_errors = list(trial.errors)
        trial.run()

        assert trial.epoch_counter == 5
        assert trial.errors == first_errors

    def test_reports_logged(self, config, xor_samples, caplog):
        inputs, outputs = xor_samples
        trial = SupervisedTrial(inputs, outputs, config)

        with caplog.at_level(logging.INFO, logger='neuroforge'):
            trial.run()

        messages = [r.getMessage() for r in caplog.records]
        assert any(m.startswith("Epoch 5") for m in messages)
        assert any("succeeded after 5 epochs" in m for m in messages)

    def test_suppressed_output(self, config, xor_samples, caplog):
        inputs, outputs = xor_samples
        trial = SupervisedTrial(inputs, outputs, config, suppress_output=True)

        with caplog.at_level(logging.INFO, logger='neuroforge'):
            trial.run()

        assert not [r for r in caplog.records if r.name == 'neuroforge.run.trial']


# ============================================================================
# Test Unsupervised Trials
# ============================================================================

class TestUnsupervisedTrial:
    """Test the unsupervised training loop."""

    def test_supervised_algorithm_rejected(self, config):
        with pytest.raises(ValueError):
            UnsupervisedTrial([[0.0, 0.0]], config)

    def test_som_trial(self, som_config):
        inputs = [[0.1, 0.1], [0.9, 0.9], [0.1, 0.9], [0.9, 0.1]]
        trial = UnsupervisedTrial(inputs, som_config, suppress_output=True)
        trial.run()

        assert trial.epoch_counter == 3
        assert all(e >= 0 for e in trial.errors)
        assert isinstance(trial.learning, SOMLearning)


# ============================================================================
# Test Custom Termination
# ============================================================================

class CountingTrial(Trial):
    """Trial with a constant error, stopping after two epochs."""

    def _setup(self, rng):
        self.setup_calls = getattr(self, 'setup_calls', 0) + 1

    def _run_epoch(self):
        return 1.0

    def _terminate(self):
        return self.epoch_counter >= 2


class TestTrialSubclass:
    """Test the Trial extension points."""

    def test_custom_terminate(self, config):
        trial = CountingTrial(config, suppress_output=True)
        trial.run()

        assert trial.setup_calls == 1
        assert trial.errors == [1.0, 1.0]

    def test_seed_from_config(self, config):
        assert CountingTrial(config).seed == 3
