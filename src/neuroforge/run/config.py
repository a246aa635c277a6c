import configparser
import os

from neuroforge.activations import activations

NETWORK_TYPES = ('activation', 'distance')

SUPERVISED_ALGORITHMS   = ('perceptron', 'delta_rule', 'back_propagation',
                           'resilient_backpropagation', 'evolutionary')
UNSUPERVISED_ALGORITHMS = ('som', 'elastic_network')

SELECTION_METHODS = ('elite', 'rank', 'roulette')


class Config:

    @staticmethod
    def _parse_layers(raw_layers):
        """
        Parse the layer sizes from string to list.

        Parameters:
            raw_layers: Either a comma-separated list of neuron counts, or already a list

        Returns:
            List with the number of neurons of each layer
        """
        # If already a list, return as-is
        if isinstance(raw_layers, list):
            return raw_layers

        try:
            layers = [int(count.strip()) for count in raw_layers.split(',')]
        except ValueError:
            raise ValueError(f"Invalid layers specification '{raw_layers}'")

        if not layers or any(count < 1 for count in layers):
            raise ValueError(f"Invalid layers specification '{raw_layers}'")
        return layers

    def __init__(self, config_file: str | None = None):
        """
        Initialize Config by parsing an INI file, or create a default Config.

        Parameters:
            config_file: Path to the INI configuration file.
                         If None, creates a default Config (a 2-2-1 sigmoid network
                         trained by back propagation) for manual attribute setting.
        """

        # Default config for testing/manual setup
        if config_file is None:
            self.network_type     = 'activation'
            self.inputs_count     = 2
            self.layers           = [2, 1]
            self.activation       = 'sigmoid'
            self.activation_alpha = 2.0
            self.weight_min       = 0.0
            self.weight_max       = 1.0

            self.algorithm       = 'back_propagation'
            self.learning_rate   = 0.1
            self.momentum        = 0.0
            self.learning_radius = None

            self.population_size          = 100
            self.crossover_rate           = 0.75
            self.mutation_rate            = 0.25
            self.random_selection_portion = 0.2
            self.auto_shuffling           = False
            self.selection                = 'elite'

            self.max_epochs      = 1000
            self.error_threshold = None

            self.seed = None

            return

        if not os.path.exists(config_file):
            raise FileNotFoundError(f"Configuration file '{config_file}' not found")

        parser = configparser.ConfigParser()
        parser.read(config_file)

        # Sentinel for missing default values
        _NO_DEFAULT = object()

        # Helper function to safely parse values
        def get_value(section, key, value_type, default=_NO_DEFAULT):
            try:
                raw_value = parser.get(section, key)
                if raw_value.lower() == 'none':
                    return None
                if value_type == int:
                    return parser.getint(section, key)
                elif value_type == float:
                    return parser.getfloat(section, key)
                elif value_type == bool:
                    return parser.getboolean(section, key)
                elif value_type == str:
                    return raw_value
            except (configparser.NoSectionError, configparser.NoOptionError):
                if default is not _NO_DEFAULT:
                    return default
                raise

        # [NETWORK]

        # The kind of network to build.
        # Allowed values:
        #   "activation" - multi-layer network of activation neurons
        #   "distance"   - single-layer network of distance neurons (SOM, elastic net)
        self.network_type = get_value('NETWORK', 'network_type', str)
        if self.network_type not in NETWORK_TYPES:
            raise ValueError(f"Invalid network_type '{self.network_type}'")

        # The number of inputs of the network.
        self.inputs_count = get_value('NETWORK', 'inputs_count', int)

        # Comma-separated number of neurons in each layer; the last
        # layer is the output layer. Distance networks have one layer.
        self.layers = self._parse_layers(get_value('NETWORK', 'layers', str))
        if self.network_type == 'distance' and len(self.layers) != 1:
            raise ValueError("A distance network has exactly one layer")

        # The activation function of the neurons (activation networks only).
        self.activation = get_value('NETWORK', 'activation', str, default='sigmoid')
        if self.activation not in activations:
            raise ValueError(f"Invalid activation function '{self.activation}'")

        # Steepness of the sigmoid functions.
        self.activation_alpha = get_value('NETWORK', 'activation_alpha', float, default=2.0)

        # Range of the random initial weights and thresholds.
        self.weight_min = get_value('NETWORK', 'weight_min', float, default=0.0)
        self.weight_max = get_value('NETWORK', 'weight_max', float, default=1.0)
        if self.weight_min > self.weight_max:
            raise ValueError("weight_min must not be larger than weight_max")

        # [LEARNING]

        # The learning algorithm.
        # Supervised:   perceptron, delta_rule, back_propagation,
        #               resilient_backpropagation, evolutionary
        # Unsupervised: som, elastic_network
        self.algorithm = get_value('LEARNING', 'algorithm', str)
        if self.algorithm not in SUPERVISED_ALGORITHMS + UNSUPERVISED_ALGORITHMS:
            raise ValueError(f"Invalid learning algorithm '{self.algorithm}'")

        # Learning rate. Use "None" to keep the algorithm's default.
        self.learning_rate = get_value('LEARNING', 'learning_rate', float, default=None)

        # Momentum (back propagation only).
        self.momentum = get_value('LEARNING', 'momentum', float, default=0.0)

        # Neighborhood radius (SOM and elastic net only).
        # Use "None" to keep the algorithm's default.
        self.learning_radius = get_value('LEARNING', 'learning_radius', float, default=None)

        # [POPULATION] (evolutionary learning only)

        # The number of chromosomes (weight vectors) in the population.
        self.population_size = get_value('POPULATION', 'population_size', int, default=100)

        # Probability that a pair of chromosomes is crossed, in each epoch.
        self.crossover_rate = get_value('POPULATION', 'crossover_rate', float, default=0.75)

        # Probability that a chromosome is mutated, in each epoch.
        self.mutation_rate = get_value('POPULATION', 'mutation_rate', float, default=0.25)

        # Portion of the population replaced by random chromosomes, in each epoch.
        self.random_selection_portion = get_value('POPULATION', 'random_selection_portion', float, default=0.2)

        # Whether to shuffle the population at the end of each epoch.
        self.auto_shuffling = get_value('POPULATION', 'auto_shuffling', bool, default=False)

        # The selection method: "elite", "rank" or "roulette".
        self.selection = get_value('POPULATION', 'selection', str, default='elite')
        if self.selection not in SELECTION_METHODS:
            raise ValueError(f"Invalid selection method '{self.selection}'")

        # [TERMINATION]

        # The maximum number of learning epochs of a trial.
        self.max_epochs = get_value('TERMINATION', 'max_epochs', int)

        # A trial stops successfully once the epoch error drops to this value.
        # Use "None" to always run 'max_epochs' epochs.
        self.error_threshold = get_value('TERMINATION', 'error_threshold', float, default=None)

        # [RANDOM]

        # Seed of the random generators; "None" for a process-seeded run.
        self.seed = get_value('RANDOM', 'seed', int, default=None)
