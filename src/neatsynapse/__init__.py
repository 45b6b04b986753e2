"""
neatsynapse - evaluation of NEAT networks with arbitrary topology.

NEAT (NeuroEvolution of Augmenting Topologies) evolves both the weights and the
structure of neural networks. This package evaluates the networks it produces:
an ordered list of neurons connected by weighted links which may be
feedforward, recurrent or self-connected. Recurrent signals are settled by
sweeping through the network several times ("snapshot" mode) or carried from
one call to the next as network memory.

Main components:
- phenotype:   Neurons, links, layers and the NetworkNEAT evaluator
- activations: Activation functions (basic kernels and softmax)
- run:         Configuration
- errors:      Package exceptions

Example:
    >>> from neatsynapse import NetworkNEAT
    >>> network = NetworkNEAT.from_dict({
    ...     "activation": "tanh",
    ...     "neurons": [{"id": 0, "type": "input"},
    ...                 {"id": 1, "type": "bias"},
    ...                 {"id": 2, "type": "output"}],
    ...     "links":   [{"from": 0, "to": 2, "weight": 0.5},
    ...                 {"from": 2, "to": 2, "weight": 0.1}]})
    >>> outputs = network.compute([1.0])
"""

__version__ = "0.1.0"

from neatsynapse.activations import ActivationFunction, ElementwiseActivation, SoftmaxActivation, create_activation
from neatsynapse.errors      import NeuralNetworkError, UnsupportedRepresentationError
from neatsynapse.phenotype   import Layer, Link, Neuron, NeuronType, NetworkBase, NetworkNEAT
from neatsynapse.run.config  import Config

__all__ = [
    "ActivationFunction",
    "ElementwiseActivation",
    "SoftmaxActivation",
    "create_activation",
    "NeuralNetworkError",
    "UnsupportedRepresentationError",
    "Layer",
    "Link",
    "Neuron",
    "NeuronType",
    "NetworkBase",
    "NetworkNEAT",
    "Config",
]
