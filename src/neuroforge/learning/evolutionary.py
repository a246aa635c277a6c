"""
Evolutionary Learning Module

This module trains the weights of an activation network with a genetic
algorithm instead of gradient descent. All weights and thresholds of the
network are laid out in a single DoubleArrayChromosome, in layer, then neuron
order, each neuron contributing its weights followed by its threshold.

Classes:
    EvolutionaryFitness:  Fitness of a weight vector over a set of samples
    EvolutionaryLearning: Supervised learning driven by a Population
"""

import sys
import logging
import numpy as np
from typing import Sequence

from neuroforge.core          import Range
from neuroforge.rng           import RandomNumberGenerator, UniformGenerator, ExponentialGenerator
from neuroforge.neuro         import ActivationNetwork
from neuroforge.genotype      import DoubleArrayChromosome
from neuroforge.fitness       import FitnessFunction
from neuroforge.pool          import Population, SelectionMethod, EliteSelection
from neuroforge.learning.base import SupervisedLearning

logger = logging.getLogger(__name__)


def network_size(network: ActivationNetwork) -> int:
    """Number of genes needed to encode all weights and thresholds of a network."""
    return sum(neuron.inputs_count + 1 for layer in network.layers for neuron in layer.neurons)


def set_network_weights(network: ActivationNetwork, genes: Sequence[float]) -> None:
    """
    Copy a flat gene vector into the network: for every layer, for every neuron,
    the neuron's weights followed by its threshold.
    """
    v = 0
    for layer in network.layers:
        for neuron in layer.neurons:
            n = neuron.inputs_count
            neuron.weights[:] = genes[v:v + n]
            neuron.threshold  = float(genes[v + n])
            v += n + 1


class EvolutionaryFitness(FitnessFunction):
    """
    Fitness function of a network weight vector.

    The chromosome's genes are written into the network, which is then computed
    on every sample. With the squared error summed over all samples and outputs:

        fitness = 1 / error

    or the largest float when the error is exactly zero.
    """

    def __init__(self,
                 network: ActivationNetwork,
                 inputs : Sequence[Sequence[float]],
                 outputs: Sequence[Sequence[float]]):
        """
        Parameters:
            network: the network whose weights are evolved
            inputs:  input vectors of the samples
            outputs: desired output vectors of the samples

        Raises:
            ValueError: if there are no samples, the number of inputs and outputs
                        differ, or the inputs do not match the network's inputs count
        """
        if len(inputs) == 0:
            raise ValueError("Input data set can not be empty.")
        if len(outputs) == 0:
            raise ValueError("Output data set can not be empty.")
        if len(inputs) != len(outputs):
            raise ValueError("Input and output data sets must be of the same size.")
        if len(inputs[0]) != network.inputs_count:
            raise ValueError("Input vectors must be of the same length as network's input.")

        self._network = network
        self._inputs  = [np.asarray(v, dtype=float) for v in inputs]
        self._outputs = [np.asarray(v, dtype=float) for v in outputs]

    def evaluate(self, chromosome: DoubleArrayChromosome) -> float:
        set_network_weights(self._network, chromosome.values)

        total_error = 0.0
        for sample_in, sample_out in zip(self._inputs, self._outputs):
            output = self._network.compute(sample_in)
            e = sample_out - output
            total_error += float(np.sum(e * e))

        if total_error == 0:
            return sys.float_info.max
        return 1.0 / total_error


class EvolutionaryLearning(SupervisedLearning):
    """
    Neural network learning based on a genetic algorithm.

    Every chromosome of the population is a complete weight vector of the
    network. The population is created on the first call to run_epoch(),
    bound to the samples given then; later calls evolve it further and ignore
    their arguments. After each epoch the best chromosome is copied into the
    network.

    Single sample learning is not supported: run() raises NotImplementedError.
    """

    def __init__(self,
                 network                      : ActivationNetwork,
                 population_size              : int,
                 chromosome_generator         : RandomNumberGenerator | None = None,
                 mutation_multiplier_generator: RandomNumberGenerator | None = None,
                 mutation_addition_generator  : RandomNumberGenerator | None = None,
                 selection_method             : SelectionMethod       | None = None,
                 crossover_rate               : float                        = 0.75,
                 mutation_rate                : float                        = 0.25,
                 random_selection_rate        : float                        = 0.2,
                 auto_shuffling               : bool                         = False,
                 rng                          : np.random.Generator   | None = None):
        """
        Parameters:
            network:                       the network to train
            population_size:               number of weight vectors in the population
            chromosome_generator:          generator of initial genes (uniform in [-1, 1] if None)
            mutation_multiplier_generator: generator of mutation factors (exponential, rate 1, if None)
            mutation_addition_generator:   generator of mutation terms (uniform in [-0.5, 0.5] if None)
            selection_method:              selection method (elite selection if None)
            crossover_rate:                crossover rate of the population
            mutation_rate:                 mutation rate of the population
            random_selection_rate:         portion of random members injected each epoch
            auto_shuffling:                shuffle the population after every epoch
            rng:                           random generator of the genetic operators
        """
        self._network = network
        self._rng     = rng if rng is not None else np.random.default_rng()
        self._number_of_weights = network_size(network)

        self._population_size = population_size
        self._chromosome_generator          = chromosome_generator or UniformGenerator(Range(-1, 1))
        self._mutation_multiplier_generator = mutation_multiplier_generator or ExponentialGenerator(1)
        self._mutation_addition_generator   = mutation_addition_generator or UniformGenerator(Range(-0.5, 0.5))
        self._selection_method = selection_method or EliteSelection(self._rng)

        self._crossover_rate        = crossover_rate
        self._mutation_rate         = mutation_rate
        self._random_selection_rate = random_selection_rate
        self._auto_shuffling        = auto_shuffling

        self._population: Population | None = None

    @property
    def population(self) -> Population | None:
        """The population being evolved (None before the first epoch)."""
        return self._population

    def run(self, inputs: Sequence[float], desired: Sequence[float]) -> float:
        raise NotImplementedError("Evolutionary learning does not support single sample learning.")

    def run_epoch(self, inputs: Sequence[Sequence[float]], outputs: Sequence[Sequence[float]]) -> float:
        """
        Run one epoch of the genetic algorithm and load the best weights into
        the network.

        Returns:
            The summed squared error of the best chromosome (1 / fitness)
        """
        if self._population is None:
            ancestor = DoubleArrayChromosome(self._chromosome_generator,
                                             self._mutation_multiplier_generator,
                                             self._mutation_addition_generator,
                                             self._number_of_weights,
                                             self._rng)

            self._population = Population(self._population_size,
                                          ancestor,
                                          EvolutionaryFitness(self._network, inputs, outputs),
                                          self._selection_method,
                                          self._rng)
            self._population.crossover_rate           = self._crossover_rate
            self._population.mutation_rate            = self._mutation_rate
            self._population.random_selection_portion = self._random_selection_rate
            self._population.auto_shuffling           = self._auto_shuffling

        self._population.run_epoch()

        best = self._population.best_chromosome
        set_network_weights(self._network, best.values)

        error = 1.0 / best.fitness
        logger.debug("EvolutionaryLearning epoch error: %.6f", error)
        return error
