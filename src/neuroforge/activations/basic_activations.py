"""
Activation Functions Module

Activation functions map a neuron's weighted input sum to its output. Each
function also knows its own derivative, in two flavours:
    derivative(x):  derivative computed from the raw input x
    derivative2(y): derivative computed from an already known output y = f(x),
                    which spares learning algorithms a second evaluation of f

Classes:
    ActivationFunction:     Abstract base class defining the interface
    SigmoidFunction:        f(x) = 1 / (1 + exp(-alpha * x)), range (0, 1)
    BipolarSigmoidFunction: f(x) = 2 / (1 + exp(-alpha * x)) - 1, range (-1, 1)
    ThresholdFunction:      f(x) = 1 if x >= 0 else 0 (not differentiable)
"""

import autograd.numpy as np  # type: ignore
from abc import ABC, abstractmethod


class ActivationFunction(ABC):
    """
    Abstract activation function.

    Public Attributes:
        name: Registry name of the function (see 'activations')

    Public Methods:
        function(x):    Calculate the function value
        derivative(x):  Calculate the derivative from the input value
        derivative2(y): Calculate the derivative from the function value
    """

    name: str = ""

    @abstractmethod
    def function(self, x: float) -> float:
        pass

    @abstractmethod
    def derivative(self, x: float) -> float:
        pass

    @abstractmethod
    def derivative2(self, y: float) -> float:
        pass

    def __call__(self, x: float) -> float:
        return self.function(x)


class SigmoidFunction(ActivationFunction):
    """
    Sigmoid activation function.

        f(x)  = 1 / (1 + exp(-alpha * x))
        f'(x) = alpha * f(x) * (1 - f(x))

    Output range is (0, 1). 'alpha' controls the steepness of the curve.
    """

    name = "sigmoid"

    def __init__(self, alpha: float = 2.0):
        self.alpha: float = alpha

    def function(self, x: float) -> float:
        Z = np.clip(-self.alpha * x, -700, 700)   # to prevent overflow when calculating exp
        return 1.0 / (1.0 + np.exp(Z))

    def derivative(self, x: float) -> float:
        y = self.function(x)
        return self.alpha * y * (1 - y)

    def derivative2(self, y: float) -> float:
        return self.alpha * y * (1 - y)

    def __repr__(self):
        return f"SigmoidFunction(alpha={self.alpha})"


class BipolarSigmoidFunction(ActivationFunction):
    """
    Bipolar sigmoid activation function.

        f(x)  = 2 / (1 + exp(-alpha * x)) - 1
        f'(x) = alpha * (1 - f(x)^2) / 2

    Output range is (-1, 1).
    """

    name = "bipolar_sigmoid"

    def __init__(self, alpha: float = 2.0):
        self.alpha: float = alpha

    def function(self, x: float) -> float:
        Z = np.clip(-self.alpha * x, -700, 700)
        return 2.0 / (1.0 + np.exp(Z)) - 1.0

    def derivative(self, x: float) -> float:
        y = self.function(x)
        return self.alpha * (1 - y * y) / 2

    def derivative2(self, y: float) -> float:
        return self.alpha * (1 - y * y) / 2

    def __repr__(self):
        return f"BipolarSigmoidFunction(alpha={self.alpha})"


class ThresholdFunction(ActivationFunction):
    """
    Threshold (step) activation function.

        f(x) = 1 if x >= 0, else 0

    The function is not differentiable; both derivatives return 0 by convention.
    Pair it with perceptron learning, never with gradient based algorithms.
    """

    name = "threshold"

    def function(self, x: float) -> float:
        return 1.0 if x >= 0 else 0.0

    def derivative(self, x: float) -> float:
        return 0.0

    def derivative2(self, y: float) -> float:
        return 0.0

    def __repr__(self):
        return "ThresholdFunction()"


activations = {
    "sigmoid"        : SigmoidFunction,
    "bipolar_sigmoid": BipolarSigmoidFunction,
    "threshold"      : ThresholdFunction,
    }

# 3-letter identifiers for each activation function
activation_codes = {
    "sigmoid"        : "SIG",
    "bipolar_sigmoid": "BSG",
    "threshold"      : "THR",
    }


def create_activation(name: str, alpha: float | None = None) -> ActivationFunction:
    """
    Instantiate an activation function by its registry name.

    Parameters:
        name:  one of the keys of 'activations'
        alpha: steepness, only used by the sigmoid functions (None = default)

    Returns:
        A new ActivationFunction instance
    """
    if name not in activations:
        raise ValueError(f"Invalid activation function '{name}'")

    cls = activations[name]
    if name == "threshold" or alpha is None:
        return cls()
    return cls(alpha)
