"""
Random Number Generators Package

Exported:
    RandomNumberGenerator: Abstract generator capability
    UniformOneGenerator:   Uniform values in [0, 1)
    UniformGenerator:      Uniform values in a Range
    ExponentialGenerator:  Exponentially distributed values
"""

from neuroforge.rng.generators import (
    RandomNumberGenerator,
    UniformOneGenerator,
    UniformGenerator,
    ExponentialGenerator
)

__all__ = [
    'RandomNumberGenerator',
    'UniformOneGenerator',
    'UniformGenerator',
    'ExponentialGenerator',
]
