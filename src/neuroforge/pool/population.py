"""
Population Module

This module implements the Population class, the orchestrator of the genetic
algorithm. A population evolves a set of chromosomes through epochs of
crossover, mutation and selection.

Classes:
    Population: Genetic algorithm population
"""

import logging
import numpy as np

from neuroforge.genotype       import Chromosome
from neuroforge.fitness        import FitnessFunction
from neuroforge.pool.selection import SelectionMethod

logger = logging.getLogger(__name__)


class Population:
    """
    A population of chromosomes evolving under a genetic algorithm.

    Each epoch grows the population temporarily (crossover and mutation append
    evaluated offspring) and then shrinks it back to 'size' through the
    selection method, optionally replacing a portion with fresh random members.

    The statistics (fitness_max, fitness_sum, fitness_avg, best_chromosome)
    are computed over the first 'size' members whenever the population is
    selected, migrated or re-evaluated.

    Public Properties:
        size:                     Target size of the population
        crossover_rate:           Probability of crossing a pair, clamped to [0.1, 1] (default 0.75)
        mutation_rate:            Probability of mutating a member, clamped to [0.1, 1] (default 0.1)
        random_selection_portion: Portion replaced by random members, clamped to [0, 0.9] (default 0)
        fitness_function:         Fitness function; setting it re-evaluates all members
        fitness_max, fitness_sum, fitness_avg, best_chromosome: Statistics

    Public Attributes:
        auto_shuffling:   Shuffle the population at the end of every epoch (default False)
        selection_method: Selection method used by selection() and resize()

    Public Methods:
        run_epoch():        One complete epoch (crossover, mutate, selection, shuffle)
        crossover():        Cross consecutive pairs of members
        mutate():           Mutate members
        selection():        Reduce the population back to its size
        regenerate():       Replace every member with a fresh random one
        shuffle():          Randomly reorder the members
        add_chromosome(c):  Evaluate and append a chromosome
        migrate(other, n, selector): Exchange n members with another population
        resize(size, selector):      Change the size of the population
    """

    def __init__(self,
                 size            : int,
                 ancestor        : Chromosome,
                 fitness_function: FitnessFunction,
                 selection_method: SelectionMethod,
                 rng             : np.random.Generator | None = None):
        """
        Initialize the population: the ancestor (evaluated and cloned) becomes
        the first member and the others are new random chromosomes of the same kind.

        Parameters:
            size:             number of chromosomes, at least 2
            ancestor:         chromosome from which the population is created
            fitness_function: fitness function evaluating the chromosomes
            selection_method: selection method reducing the population
            rng:              random generator for the epoch operators

        Raises:
            ValueError: if size < 2
        """
        if size < 2:
            raise ValueError("Too small population's size was specified.")

        self._fitness_function = fitness_function
        self.selection_method  = selection_method
        self._size             = size
        self._rng = rng if rng is not None else np.random.default_rng()

        self.auto_shuffling           : bool  = False
        self._crossover_rate          : float = 0.75
        self._mutation_rate           : float = 0.10
        self._random_selection_portion: float = 0.0

        self._fitness_max: float = 0.0
        self._fitness_sum: float = 0.0
        self._fitness_avg: float = 0.0
        self._best_chromosome: Chromosome | None = None

        ancestor.evaluate(fitness_function)
        self._members: list[Chromosome] = [ancestor.clone()]
        for _ in range(1, size):
            self.add_chromosome(ancestor.create_new())

        self._find_best_chromosome()

    @property
    def size(self) -> int:
        return self._size

    @property
    def crossover_rate(self) -> float:
        return self._crossover_rate

    @crossover_rate.setter
    def crossover_rate(self, value: float) -> None:
        self._crossover_rate = max(0.1, min(1.0, value))

    @property
    def mutation_rate(self) -> float:
        return self._mutation_rate

    @mutation_rate.setter
    def mutation_rate(self, value: float) -> None:
        self._mutation_rate = max(0.1, min(1.0, value))

    @property
    def random_selection_portion(self) -> float:
        return self._random_selection_portion

    @random_selection_portion.setter
    def random_selection_portion(self, value: float) -> None:
        self._random_selection_portion = max(0.0, min(0.9, value))

    @property
    def fitness_function(self) -> FitnessFunction:
        return self._fitness_function

    @fitness_function.setter
    def fitness_function(self, function: FitnessFunction) -> None:
        self._fitness_function = function
        for member in self._members:
            member.evaluate(function)
        self._find_best_chromosome()

    @property
    def fitness_max(self) -> float:
        return self._fitness_max

    @property
    def fitness_sum(self) -> float:
        return self._fitness_sum

    @property
    def fitness_avg(self) -> float:
        return self._fitness_avg

    @property
    def best_chromosome(self) -> Chromosome | None:
        return self._best_chromosome

    def __len__(self):
        return len(self._members)

    def __getitem__(self, index: int) -> Chromosome:
        return self._members[index]

    def run_epoch(self) -> None:
        """
        Run one epoch of the genetic algorithm: crossover, mutation, selection,
        and a final shuffle if 'auto_shuffling' is set.
        """
        self.crossover()
        self.mutate()
        self.selection()

        if self.auto_shuffling:
            self.shuffle()

        logger.debug("Epoch: max fitness %.6g, average fitness %.6g", self._fitness_max, self._fitness_avg)

    def crossover(self) -> None:
        """
        Cross the pairs of members (0, 1), (2, 3), ... each with probability
        'crossover_rate'. The parents are cloned first; the two evaluated
        offspring are appended to the population.
        """
        for i in range(1, self._size, 2):
            if self._rng.random() <= self._crossover_rate:
                c1 = self._members[i - 1].clone()
                c2 = self._members[i].clone()

                c1.crossover(c2)

                c1.evaluate(self._fitness_function)
                c2.evaluate(self._fitness_function)

                self._members.append(c1)
                self._members.append(c2)

    def mutate(self) -> None:
        """
        Mutate a clone of each of the first 'size' members with probability
        'mutation_rate', appending the evaluated mutants.
        """
        for i in range(self._size):
            if self._rng.random() <= self._mutation_rate:
                c = self._members[i].clone()
                c.mutate()
                c.evaluate(self._fitness_function)
                self._members.append(c)

    def selection(self) -> None:
        """
        Reduce the population to 'size' members: the selection method keeps
        size - random_amount of them, the rest are new random chromosomes.
        """
        random_amount = int(self._random_selection_portion * self._size)

        self.selection_method.apply_selection(self._members, self._size - random_amount)

        if random_amount > 0:
            ancestor = self._members[0]
            for _ in range(random_amount):
                self.add_chromosome(ancestor.create_new())

        self._find_best_chromosome()

    def regenerate(self) -> None:
        """Replace the whole population with new random chromosomes."""
        ancestor = self._members[0]

        self._members = []
        for _ in range(self._size):
            self.add_chromosome(ancestor.create_new())

    def shuffle(self) -> None:
        """Randomly reorder the members of the population."""
        order = self._rng.permutation(len(self._members))
        self._members = [self._members[i] for i in order]

    def add_chromosome(self, chromosome: Chromosome) -> None:
        """
        Evaluate a chromosome and append it to the population.
        The target size is not changed.
        """
        chromosome.evaluate(self._fitness_function)
        self._members.append(chromosome)

    def migrate(self, other: 'Population', number_of_migrants: int, migrants_selector: SelectionMethod) -> None:
        """
        Exchange members with another population.

        Clones of each population's members are reduced to 'number_of_migrants'
        by 'migrants_selector'. Both populations are then sorted by fitness, lose
        their worst 'number_of_migrants' members, and receive the migrants of the
        other population. Both sizes stay the same.

        Parameters:
            other:              the population to exchange with
            number_of_migrants: number of members sent (and received) by each population
            migrants_selector:  selection method choosing the migrants
        """
        current_size = self._size
        other_size   = other._size

        current_copy = [c.clone() for c in self._members[:current_size]]
        other_copy   = [c.clone() for c in other._members[:other_size]]

        migrants_selector.apply_selection(current_copy, number_of_migrants)
        migrants_selector.apply_selection(other_copy, number_of_migrants)

        self._members.sort()
        other._members.sort()

        del self._members[current_size - number_of_migrants:current_size]
        del other._members[other_size - number_of_migrants:other_size]

        self._members.extend(other_copy)
        other._members.extend(current_copy)

        self._find_best_chromosome()
        other._find_best_chromosome()

    def resize(self, new_size: int, selector: SelectionMethod | None = None) -> None:
        """
        Change the size of the population.

        Growing appends new random members; shrinking applies the selector
        (the population's own selection method if None).

        Raises:
            ValueError: if new_size < 2
        """
        if new_size < 2:
            raise ValueError("Too small new population's size was specified.")

        if new_size > self._size:
            ancestor = self._members[0]
            for _ in range(new_size - len(self._members)):
                self.add_chromosome(ancestor.create_new())
        else:
            selector = selector if selector is not None else self.selection_method
            selector.apply_selection(self._members, new_size)

        self._size = new_size

    def _find_best_chromosome(self) -> None:
        """Recompute the fitness statistics over the first 'size' members."""
        best = self._members[0]
        fitness_max = best.fitness
        fitness_sum = fitness_max

        for member in self._members[1:self._size]:
            fitness_sum += member.fitness
            if member.fitness > fitness_max:
                fitness_max = member.fitness
                best = member

        self._best_chromosome = best
        self._fitness_max = fitness_max
        self._fitness_sum = fitness_sum
        self._fitness_avg = fitness_sum / self._size

    def __repr__(self):
        return f"Population(size={self._size}, fitness_max={self._fitness_max:.6g})"
