"""
Fitness Package

Fitness functions evaluating chromosomes.

Exported:
    FitnessFunction:             Abstract base class
    Mode:                        Optimization direction
    OptimizationFunction1D:      Optimization of f(x) over a BinaryChromosome
    OptimizationFunction2D:      Optimization of f(x, y) over a BinaryChromosome
    SymbolicRegressionFitness:   Function approximation with polish expressions
    TimeSeriesPredictionFitness: Time series prediction with polish expressions
"""

from neuroforge.fitness.base                import FitnessFunction
from neuroforge.fitness.optimization        import Mode, OptimizationFunction1D, OptimizationFunction2D
from neuroforge.fitness.symbolic_regression import SymbolicRegressionFitness
from neuroforge.fitness.time_series         import TimeSeriesPredictionFitness

__all__ = [
    'FitnessFunction',
    'Mode',
    'OptimizationFunction1D',
    'OptimizationFunction2D',
    'SymbolicRegressionFitness',
    'TimeSeriesPredictionFitness',
]
