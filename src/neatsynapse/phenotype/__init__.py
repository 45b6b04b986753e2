"""
NEAT Phenotype Package

This package implements executable networks for topologies evolved by NEAT.
A network is an ordered list of neurons connected by weighted links, sitting
between an input layer and an output layer. Links may be feedforward, recurrent
or self-connections; recurrence is handled by the number of sweeps through the
list and by whether neuron outputs persist between calls.

Modules:
    neuron:       NeuronType enumeration, Link and Neuron classes
    layer:        Layer class (the network only uses its neuron count)
    network_base: Abstract base class for neuron/link networks
    network_neat: The NEAT network evaluator

Exported Classes:
    Layer:       A layer on either side of a network
    Link:        A weighted connection from a source neuron
    Neuron:      A computational node with its inbound links
    NeuronType:  Enumeration for neuron types (INPUT, BIAS, HIDDEN, OUTPUT)
    NetworkBase: Abstract base class for neuron/link networks
    NetworkNEAT: Evaluator for NEAT networks with arbitrary topology
"""

from neatsynapse.phenotype.layer        import Layer
from neatsynapse.phenotype.neuron       import Link, Neuron, NeuronType
from neatsynapse.phenotype.network_base import NetworkBase
from neatsynapse.phenotype.network_neat import NetworkNEAT

__all__ = ['Layer',
           'Link',
           'Neuron',
           'NeuronType',
           'NetworkBase',
           'NetworkNEAT']
