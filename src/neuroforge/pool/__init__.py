"""
Pool Package

Genetic algorithm population and selection methods.

Exported:
    Population:             Genetic algorithm population
    SelectionMethod:        Abstract selection method
    EliteSelection:         Keep the fittest
    RankSelection:          Rank-proportional selection
    RouletteWheelSelection: Fitness-proportional selection
"""

from neuroforge.pool.selection  import SelectionMethod, EliteSelection, RankSelection, RouletteWheelSelection
from neuroforge.pool.population import Population

__all__ = [
    'Population',
    'SelectionMethod',
    'EliteSelection',
    'RankSelection',
    'RouletteWheelSelection',
]
