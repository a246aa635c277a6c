"""
Trial Module

A trial is one independent training run: a network is built from the
configuration and trained, one epoch at a time, until the error falls to the
configured threshold or the maximum number of epochs is reached.

Classes:
    Trial:             Abstract base class of all trials
    SupervisedTrial:   Trial training on (input, desired output) samples
    UnsupervisedTrial: Trial training on input samples only (SOM, elastic net)

Functions:
    build_network:   Create the network described by a Config
    build_selection: Create the selection method described by a Config
    build_learning:  Create the learning algorithm described by a Config
"""

import logging
import numpy as np
from abc    import ABC, abstractmethod
from typing import Sequence

from neuroforge.core        import Range
from neuroforge.activations import create_activation
from neuroforge.neuro       import Network, ActivationNetwork, DistanceNetwork
from neuroforge.pool        import SelectionMethod, EliteSelection, RankSelection, RouletteWheelSelection
from neuroforge.learning    import (SupervisedLearning,
                                    UnsupervisedLearning,
                                    PerceptronLearning,
                                    DeltaRuleLearning,
                                    BackPropagationLearning,
                                    ResilientBackpropagationLearning,
                                    SOMLearning,
                                    ElasticNetworkLearning,
                                    EvolutionaryLearning)
from neuroforge.run.config  import Config, SUPERVISED_ALGORITHMS, UNSUPERVISED_ALGORITHMS

logger = logging.getLogger(__name__)

selection_methods = {
    'elite'   : EliteSelection,
    'rank'    : RankSelection,
    'roulette': RouletteWheelSelection,
    }


def build_network(config: Config, rng: np.random.Generator | None = None) -> Network:
    """
    Create the network described by the [NETWORK] section of a configuration.

    Parameters:
        config: configuration parameters
        rng:    random generator initializing the weights

    Returns:
        An ActivationNetwork or a DistanceNetwork
    """
    weight_range = Range(config.weight_min, config.weight_max)

    if config.network_type == 'distance':
        if len(config.layers) != 1:
            raise ValueError("A distance network has exactly one layer")
        return DistanceNetwork(config.inputs_count, config.layers[0], rng=rng, weight_range=weight_range)

    if config.network_type == 'activation':
        function = create_activation(config.activation, config.activation_alpha)
        return ActivationNetwork(function, config.inputs_count, *config.layers, rng=rng, weight_range=weight_range)

    raise ValueError(f"Invalid network_type '{config.network_type}'")


def build_selection(config: Config, rng: np.random.Generator | None = None) -> SelectionMethod:
    """Create the selection method named by 'config.selection'."""
    if config.selection not in selection_methods:
        raise ValueError(f"Invalid selection method '{config.selection}'")
    return selection_methods[config.selection](rng)


def build_learning(config     : Config,
                   network    : Network,
                   rng        : np.random.Generator | None = None) -> SupervisedLearning | UnsupervisedLearning:
    """
    Create the learning algorithm described by the [LEARNING] and [POPULATION]
    sections of a configuration. Unset rates keep the algorithm's defaults.

    Parameters:
        config:  configuration parameters
        network: the network to train
        rng:     random generator of stochastic algorithms

    Returns:
        The learning algorithm, bound to the network

    Raises:
        ValueError: if the algorithm is unknown or does not suit the network type
    """
    algorithm = config.algorithm

    if algorithm in SUPERVISED_ALGORITHMS and not isinstance(network, ActivationNetwork):
        raise ValueError(f"Learning algorithm '{algorithm}' needs an activation network")
    if algorithm in UNSUPERVISED_ALGORITHMS and not isinstance(network, DistanceNetwork):
        raise ValueError(f"Learning algorithm '{algorithm}' needs a distance network")

    if algorithm == 'perceptron':
        learning = PerceptronLearning(network)
    elif algorithm == 'delta_rule':
        learning = DeltaRuleLearning(network)
    elif algorithm == 'back_propagation':
        learning = BackPropagationLearning(network)
        learning.momentum = config.momentum
    elif algorithm == 'resilient_backpropagation':
        learning = ResilientBackpropagationLearning(network)
    elif algorithm == 'som':
        learning = SOMLearning(network)
        if config.learning_radius is not None:
            learning.learning_radius = config.learning_radius
    elif algorithm == 'elastic_network':
        learning = ElasticNetworkLearning(network)
        if config.learning_radius is not None:
            learning.learning_radius = config.learning_radius
    elif algorithm == 'evolutionary':
        return EvolutionaryLearning(network,
                                    config.population_size,
                                    selection_method=build_selection(config, rng),
                                    crossover_rate=config.crossover_rate,
                                    mutation_rate=config.mutation_rate,
                                    random_selection_rate=config.random_selection_portion,
                                    auto_shuffling=config.auto_shuffling,
                                    rng=rng)
    else:
        raise ValueError(f"Invalid learning algorithm '{algorithm}'")

    if config.learning_rate is not None:
        learning.learning_rate = config.learning_rate
    return learning


class Trial(ABC):
    """
    Abstract base class for implementing a training trial.

    A trial represents one independent training run: the network and learning
    algorithm are created from the configuration, then trained epoch after
    epoch until the terminate condition is met.

    Subclasses must implement:
    - _setup(): Create the network and the learning algorithm
    - _run_epoch(): Run one learning epoch and return its error

    Subclasses can override:
    - _terminate(): Custom termination logic (default: max epochs + error threshold)
    - _report_progress(), _final_report(): Progress reporting (default: logging)

    Public Attributes:
        seed:     Seed of the trial's random generator (from the configuration)
        network:  The trained network (None before run())
        learning: The learning algorithm (None before run())
        errors:   Error of every epoch run so far
        failed:   Whether the trial ended without reaching the error threshold

    Public Methods:
        run(): Execute a complete trial
    """

    def __init__(self, config: Config, suppress_output: bool = False):
        """
        Initialize the trial.

        Parameters:
            config:          Configuration parameters
            suppress_output: If True, suppress progress and final reports
                             (useful when running multiple trials in experiments)
        """
        self._config         : Config     = config
        self._epoch_counter  : int        = 0
        self._suppress_output: bool       = suppress_output
        self.seed            : int | None = config.seed
        self.network                      = None
        self.learning                     = None
        self.errors          : list[float] = []
        self.failed          : bool        = True

    @property
    def epoch_counter(self) -> int:
        return self._epoch_counter

    def run(self) -> None:
        """
        Run the trial.

        Resets the trial state, builds the network and the learning algorithm,
        and trains until the terminate condition is met.
        """
        # Reset the trial state before starting a new run
        self._reset()

        rng = np.random.default_rng(self.seed)
        self._setup(rng)

        # Training loop
        while not self._terminate():
            self._epoch_counter += 1
            self.errors.append(self._run_epoch())

            if not self._suppress_output:
                self._report_progress()

        if not self._suppress_output:
            self._final_report()

    def _reset(self) -> None:
        """
        Reset the trial state before starting a new run.
        """
        self._epoch_counter = 0
        self.errors = []
        self.failed = True

    @abstractmethod
    def _setup(self, rng: np.random.Generator) -> None:
        """
        Create 'self.network' and 'self.learning'.

        Parameters:
            rng: random generator of the trial, seeded with 'self.seed'
        """
        pass

    @abstractmethod
    def _run_epoch(self) -> float:
        """
        Run one learning epoch.

        Returns:
            The error of the epoch
        """
        pass

    def _report_progress(self) -> None:
        """
        Report trial progress after each epoch.
        This method is suppressed by setting 'self._suppress_output' to 'True'.
        """
        logger.info("Epoch %d: error %.6f", self._epoch_counter, self.errors[-1])

    def _final_report(self) -> None:
        """
        Produce final report at the end of the trial.
        This method is suppressed by setting 'self._suppress_output' to 'True'.
        """
        status = "failed" if self.failed else "succeeded"
        final  = self.errors[-1] if self.errors else float('nan')
        logger.info("Trial %s after %d epochs, final error %.6f", status, self._epoch_counter, final)

    def _terminate(self) -> bool:
        """
        Determine whether the trial should terminate.

        This default implementation stops the trial after a maximum number of
        epochs and, if an error threshold is configured, as soon as the error of
        the last epoch is at or below it.

        Returns:
            bool: True if the trial should stop, False otherwise
        """
        # Has this trial run for too long?
        terminate = self._epoch_counter >= self._config.max_epochs

        # Check whether the error has reached the target threshold
        if self._config.error_threshold is not None and self.errors:
            success   = self.errors[-1] <= self._config.error_threshold
            terminate = terminate or success

            if terminate:
                self.failed = not success
        elif terminate:
            # without a threshold, completing all epochs is a success
            self.failed = False

        return terminate


class SupervisedTrial(Trial):
    """
    Trial of a supervised learning algorithm on a fixed set of samples.
    """

    def __init__(self,
                 inputs         : Sequence[Sequence[float]],
                 outputs        : Sequence[Sequence[float]],
                 config         : Config,
                 suppress_output: bool = False):
        """
        Parameters:
            inputs:          input vectors of the samples
            outputs:         desired output vectors of the samples
            config:          configuration parameters
            suppress_output: If True, suppress progress and final reports
        """
        if config.algorithm not in SUPERVISED_ALGORITHMS:
            raise ValueError(f"'{config.algorithm}' is not a supervised learning algorithm")
        if len(inputs) != len(outputs):
            raise ValueError(f"Got {len(inputs)} input samples but {len(outputs)} output samples")

        super().__init__(config, suppress_output)
        self._inputs  = inputs
        self._outputs = outputs

    def _setup(self, rng: np.random.Generator) -> None:
        self.network  = build_network(self._config, rng)
        self.learning = build_learning(self._config, self.network, rng)

    def _run_epoch(self) -> float:
        return self.learning.run_epoch(self._inputs, self._outputs)


class UnsupervisedTrial(Trial):
    """
    Trial of an unsupervised learning algorithm (SOM, elastic net).
    """

    def __init__(self,
                 inputs         : Sequence[Sequence[float]],
                 config         : Config,
                 suppress_output: bool = False):
        """
        Parameters:
            inputs:          the training samples
            config:          configuration parameters
            suppress_output: If True, suppress progress and final reports
        """
        if config.algorithm not in UNSUPERVISED_ALGORITHMS:
            raise ValueError(f"'{config.algorithm}' is not an unsupervised learning algorithm")

        super().__init__(config, suppress_output)
        self._inputs = inputs

    def _setup(self, rng: np.random.Generator) -> None:
        self.network  = build_network(self._config, rng)
        self.learning = build_learning(self._config, self.network, rng)

    def _run_epoch(self) -> float:
        return self.learning.run_epoch(self._inputs)
