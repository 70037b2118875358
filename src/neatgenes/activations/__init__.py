"""
Activations Package

This package provides the activation function families a neuron gene can
select. Every function has the signature f(z, a, b), where 'a' scales the
input (slope or frequency) and 'b' shifts it, and is written with
autograd's numpy so it can be differentiated.

Exported:
    ActivationFunction: Enumeration of activation function families
    activations:        Dictionary mapping each family to its function
    activation_codes:   Dictionary mapping each family to a 3-letter code
"""

from neatgenes.activations.basic_activations import (
    ActivationFunction,
    activations,
    activation_codes
)

__all__ = [
    'ActivationFunction',
    'activations',
    'activation_codes'
]
