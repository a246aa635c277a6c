"""
neuroforge - Feed-forward neural networks and genetic algorithms in Python.

This package provides feed-forward neural networks (activation and distance
based), supervised and unsupervised learning algorithms, and a genetic
algorithm engine which can also train network weights.

Main components:
- core: Value ranges and the polish expression evaluator
- rng: Random number generators consumed by chromosomes
- activations: Activation functions for neural networks
- neuro: Neurons, layers and networks (forward computation)
- learning: Perceptron, delta rule, back propagation, RProp, SOM, elastic net, evolutionary
- genotype: Chromosomes (binary, short array, permutation, double array)
- fitness: Fitness functions
- pool: Population and selection methods
- run: Configuration, trials and experiments

Example:
    >>> from neuroforge import ActivationNetwork, BackPropagationLearning, SigmoidFunction
    >>> network  = ActivationNetwork(SigmoidFunction(2), 2, 2, 1)
    >>> learning = BackPropagationLearning(network)
    >>> error    = learning.run_epoch([[0, 0], [0, 1], [1, 0], [1, 1]], [[0], [1], [1], [0]])
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from neuroforge.core        import Range, PolishExpression
from neuroforge.activations import SigmoidFunction, BipolarSigmoidFunction, ThresholdFunction
from neuroforge.neuro       import ActivationNetwork, DistanceNetwork
from neuroforge.learning    import (PerceptronLearning,
                                    DeltaRuleLearning,
                                    BackPropagationLearning,
                                    ResilientBackpropagationLearning,
                                    SOMLearning,
                                    ElasticNetworkLearning,
                                    EvolutionaryLearning)
from neuroforge.pool        import Population
from neuroforge.run.config     import Config
from neuroforge.run.trial      import SupervisedTrial, UnsupervisedTrial
from neuroforge.run.experiment import Experiment

__all__ = [
    "Range",
    "PolishExpression",
    "SigmoidFunction",
    "BipolarSigmoidFunction",
    "ThresholdFunction",
    "ActivationNetwork",
    "DistanceNetwork",
    "PerceptronLearning",
    "DeltaRuleLearning",
    "BackPropagationLearning",
    "ResilientBackpropagationLearning",
    "SOMLearning",
    "ElasticNetworkLearning",
    "EvolutionaryLearning",
    "Population",
    "Config",
    "SupervisedTrial",
    "UnsupervisedTrial",
    "Experiment",
]
