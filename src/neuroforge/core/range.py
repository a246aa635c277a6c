"""
Range Module

This module implements the Range class, a closed interval of real values used
for weight initialization bounds, random number generation and the domains of
function optimization problems.

Classes:
    Range: Inclusive (min, max) interval
"""


class Range:
    """
    A closed interval [min, max] of real values.

    Ranges are immutable by convention: nothing in the library modifies a Range
    after it has been handed over, so the same instance can safely be shared
    between neurons, generators and fitness functions.

    Public Attributes:
        min: Lower bound (inclusive)
        max: Upper bound (inclusive)

    Public Properties:
        length: Distance between the two bounds

    Public Methods:
        is_inside(value):      Check whether a value (or a whole Range) lies inside this range
        is_overlapping(other): Check whether two ranges have at least one common point
    """

    def __init__(self, min_value: float, max_value: float):
        """
        Parameters:
            min_value: lower bound of the range
            max_value: upper bound of the range
        """
        self.min: float = min_value
        self.max: float = max_value

    @property
    def length(self) -> float:
        """Length of the range (max - min)."""
        return self.max - self.min

    def is_inside(self, value: 'float | Range') -> bool:
        """
        Check whether a value, or another range, is inside this range.

        Parameters:
            value: a number, or a Range which must lie completely inside this one

        Returns:
            True if the value (both bounds, for a Range) is inside the range
        """
        if isinstance(value, Range):
            return self.is_inside(value.min) and self.is_inside(value.max)
        return self.min <= value <= self.max

    def is_overlapping(self, other: 'Range') -> bool:
        """
        Check whether this range overlaps another one.

        Parameters:
            other: the range to check against

        Returns:
            True if the two ranges share at least one point
        """
        return (self.is_inside(other.min) or self.is_inside(other.max) or
                other.is_inside(self.min) or other.is_inside(self.max))

    def __eq__(self, other):
        if not isinstance(other, Range):
            return NotImplemented
        return self.min == other.min and self.max == other.max

    def __hash__(self):
        return hash((self.min, self.max))

    def __repr__(self):
        return f"Range({self.min}, {self.max})"
