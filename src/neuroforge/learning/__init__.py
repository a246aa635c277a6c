"""
Learning Package

Learning algorithms training the networks of the neuro package.

Exported:
    SupervisedLearning, UnsupervisedLearning: Abstract interfaces
    PerceptronLearning:               Perceptron rule (single layer)
    DeltaRuleLearning:                Delta rule (single layer)
    BackPropagationLearning:          Back propagation with momentum
    ResilientBackpropagationLearning: RProp
    SOMLearning:                      Kohonen self-organizing map
    ElasticNetworkLearning:           Elastic net
    EvolutionaryFitness, EvolutionaryLearning: Genetic algorithm training
"""

from neuroforge.learning.base                      import SupervisedLearning, UnsupervisedLearning
from neuroforge.learning.perceptron                import PerceptronLearning
from neuroforge.learning.delta_rule                import DeltaRuleLearning
from neuroforge.learning.back_propagation          import BackPropagationLearning
from neuroforge.learning.resilient_backpropagation import ResilientBackpropagationLearning
from neuroforge.learning.som                       import SOMLearning
from neuroforge.learning.elastic_network           import ElasticNetworkLearning
from neuroforge.learning.evolutionary              import EvolutionaryFitness, EvolutionaryLearning

__all__ = [
    'SupervisedLearning',
    'UnsupervisedLearning',
    'PerceptronLearning',
    'DeltaRuleLearning',
    'BackPropagationLearning',
    'ResilientBackpropagationLearning',
    'SOMLearning',
    'ElasticNetworkLearning',
    'EvolutionaryFitness',
    'EvolutionaryLearning',
]
