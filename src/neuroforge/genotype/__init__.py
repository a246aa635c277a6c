"""
Genotype Package

Chromosomes: the genome representations evolved by the genetic algorithms.

Exported:
    Chromosome:            Abstract base class
    BinaryChromosome:      Bit string of up to 64 bits
    ShortArrayChromosome:  Array of bounded non-negative integers
    PermutationChromosome: Permutation of 0 .. length-1
    DoubleArrayChromosome: Array of real numbers
    BoundedArrayOperators, PermutationOperators: operator strategies of ShortArrayChromosome
"""

from neuroforge.genotype.chromosome_base         import Chromosome
from neuroforge.genotype.binary_chromosome       import BinaryChromosome
from neuroforge.genotype.short_array_chromosome  import (ShortArrayChromosome,
                                                         PermutationChromosome,
                                                         BoundedArrayOperators,
                                                         PermutationOperators)
from neuroforge.genotype.double_array_chromosome import DoubleArrayChromosome

__all__ = [
    'Chromosome',
    'BinaryChromosome',
    'ShortArrayChromosome',
    'PermutationChromosome',
    'BoundedArrayOperators',
    'PermutationOperators',
    'DoubleArrayChromosome',
]
