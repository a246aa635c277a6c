"""
Activations Package

This package provides activation functions for activation neurons.

Exported:
    activations:       Dictionary mapping activation function names to classes
    activation_codes:  Dictionary mapping activation function names to 3-letter codes
    create_activation: Instantiate an activation function by name
    ActivationFunction, SigmoidFunction, BipolarSigmoidFunction, ThresholdFunction
"""

from neuroforge.activations.basic_activations import (
    activations,
    activation_codes,
    create_activation,
    ActivationFunction,
    SigmoidFunction,
    BipolarSigmoidFunction,
    ThresholdFunction
)

__all__ = [
    'activations',
    'activation_codes',
    'create_activation',
    'ActivationFunction',
    'SigmoidFunction',
    'BipolarSigmoidFunction',
    'ThresholdFunction',
]
