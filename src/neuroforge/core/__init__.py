"""
Core Package

Basic value types shared by the whole library.

Exported:
    Range:            Inclusive interval of real values
    PolishExpression: Evaluator for expressions in polish notation
"""

from neuroforge.core.range             import Range
from neuroforge.core.polish_expression import PolishExpression

__all__ = [
    'Range',
    'PolishExpression',
]
