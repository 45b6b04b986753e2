"""
Activations Package

This package provides the activation functions applied by the network evaluators.

Exported:
    kernels:               Dictionary mapping kernel names to autograd-compatible functions
    ActivationFunction:    Abstract base class for activation functions
    ElementwiseActivation: Applies a named kernel to each value
    SoftmaxActivation:     Normalized exponential over a slice
    activation_names:      All names accepted by 'create_activation'
    create_activation:     Build an activation function from its name
"""

from neatsynapse.activations.basic_activations   import kernels
from neatsynapse.activations.activation_function import ActivationFunction, ElementwiseActivation
from neatsynapse.activations.softmax_activation  import SoftmaxActivation

activation_names = list(kernels.keys()) + [SoftmaxActivation.name]

def create_activation(name: str) -> ActivationFunction:
    """
    Build a new activation function.

    Parameters:
        name: "softmax" or the name of a basic kernel (e.g. 'sigmoid', 'tanh')

    Returns:
        A new ActivationFunction instance

    Raises:
        ValueError: If 'name' is not a known activation function
    """
    if name == SoftmaxActivation.name:
        return SoftmaxActivation()
    return ElementwiseActivation(name)

__all__ = [
    'kernels',
    'ActivationFunction',
    'ElementwiseActivation',
    'SoftmaxActivation',
    'activation_names',
    'create_activation'
]
