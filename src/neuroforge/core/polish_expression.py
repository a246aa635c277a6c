"""
Polish Expression Module

A small evaluator for expressions written in (reverse) polish notation, as
produced by genetic-programming chromosomes. Fitness functions such as
symbolic regression and time series prediction use it to turn a chromosome's
string form into a number.

Grammar (tokens are separated by single spaces):
    - numeric literal:  any token starting with a digit, e.g. "2" or "3.5"
    - variable:         "$i" refers to variables[i]
    - binary operators: + - * /
    - unary functions:  sin cos ln exp sqrt

Example:
    >>> PolishExpression.evaluate("2 $0 / 3 $1 * +", [3, 4])
    12.666666666666666
"""

import math
from typing import Callable, Sequence


def _divide(a: float, b: float) -> float:
    # IEEE semantics, an evolved expression dividing by zero is not an error
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _ln(v: float) -> float:
    if v < 0 or math.isnan(v):
        return math.nan
    if v == 0:
        return -math.inf
    return math.log(v)


def _sqrt(v: float) -> float:
    return math.nan if v < 0 or math.isnan(v) else math.sqrt(v)


def _exp(v: float) -> float:
    try:
        return math.exp(v)
    except OverflowError:
        return math.inf


_BINARY: dict[str, Callable[[float, float], float]] = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": _divide,
}

_UNARY: dict[str, Callable[[float], float]] = {
    "sin" : math.sin,
    "cos" : math.cos,
    "ln"  : _ln,
    "exp" : _exp,
    "sqrt": _sqrt,
}


class PolishExpression:
    """
    Evaluator of expressions in polish notation.
    """

    @staticmethod
    def evaluate(expression: str, variables: Sequence[float]) -> float:
        """
        Evaluate an expression.

        Parameters:
            expression: the expression, tokens separated by spaces
            variables:  values substituted for the "$i" tokens

        Returns:
            The value of the expression

        Raises:
            ValueError: on an unsupported function or a malformed expression
        """
        arguments: list[float] = []

        for token in expression.strip().split(" "):
            if not token:
                raise ValueError("Incorrect expression.")

            if token[0].isdigit():
                arguments.append(float(token))
            elif token[0] == "$":
                arguments.append(float(variables[int(token[1:])]))
            elif token in _BINARY:
                if len(arguments) < 2:
                    raise ValueError("Incorrect expression.")
                v = arguments.pop()
                arguments.append(_BINARY[token](arguments.pop(), v))
            elif token in _UNARY:
                if not arguments:
                    raise ValueError("Incorrect expression.")
                arguments.append(_UNARY[token](arguments.pop()))
            else:
                raise ValueError(f"Unsupported function: {token}")

        if len(arguments) != 1:
            raise ValueError("Incorrect expression.")

        return arguments[0]
