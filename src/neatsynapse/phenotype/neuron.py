"""
NEAT Neuron Module

This module implements the building blocks of a NEAT network: neurons and the
weighted links feeding them. Links do not hold a reference to their source
neuron; they store its index in the owning network's neuron sequence. The
network therefore owns every neuron, while a link may still point anywhere in
it: backwards (feedforward), forwards (recurrent) or to its own destination
(self-connection).

Classes:
    NeuronType: Enumeration for neuron types (INPUT, BIAS, HIDDEN, OUTPUT)
    Link:       A weighted connection from a source neuron
    Neuron:     A computational node with its inbound links
"""

from enum   import Enum
from typing import Iterable

class NeuronType(Enum):
    """
    Neurons come in four types: input, bias, hidden, output.
    """
    INPUT  = "I"
    BIAS   = "B"
    HIDDEN = "H"
    OUTPUT = "O"

class Link:
    """
    A weighted, directed connection feeding a neuron.

    Public Attributes:
        weight:     Weight multiplier applied to the source neuron's output
        from_index: Index of the source neuron in the owning network's neuron list

    Public Methods:
        copy(): Return an independent copy of this link
    """

    __slots__ = ('weight', 'from_index')

    def __init__(self, weight: float, from_index: int):
        """
        Parameters:
            weight:     Weight of the link
            from_index: Index of the source neuron in the network's neuron list
        """
        self.weight    : float = weight
        self.from_index: int   = from_index

    def copy(self) -> "Link":
        return Link(self.weight, self.from_index)

    def __repr__(self):
        return f"Link(weight={self.weight:+.6f}, from_index={self.from_index})"

class Neuron:
    """
    A computational node (neuron) in a NEAT network.

    Input neurons hold the value they were seeded with and the bias neuron
    always outputs 1. Hidden and output neurons compute their output as:
        activation(sum(link.weight * source.output) / activation_response)

    Public Attributes:
        id:                  Identifier, unique within a network
        type:                Neuron type (INPUT, BIAS, HIDDEN or OUTPUT)
        activation_response: Divisor applied to the weighted input before activation
        output:              The last computed (or seeded) output value
        inbound_links:       Links feeding this neuron, in a stable order

    Public Methods:
        copy():                     Return an independent copy, including links
        is_self_connected(index):   Whether one of the links starts at 'index'
    """

    def __init__(self,
                 neuron_id          : int,
                 neuron_type        : NeuronType,
                 activation_response: float = 1.0,
                 inbound_links      : Iterable[Link] = (),
                 output             : float = 0.0):
        """
        Parameters:
            neuron_id:           Unique identifier for this neuron
            neuron_type:         Type of neuron (INPUT, BIAS, HIDDEN or OUTPUT)
            activation_response: Divisor applied before activation
            inbound_links:       Links feeding this neuron
            output:              Initial output value
        """
        self.id                 : int        = neuron_id
        self.type               : NeuronType = neuron_type
        self.activation_response: float      = activation_response
        self.output             : float      = output
        self.inbound_links      : list[Link] = list(inbound_links)

    def copy(self) -> "Neuron":
        return Neuron(self.id,
                      self.type,
                      self.activation_response,
                      [link.copy() for link in self.inbound_links],
                      self.output)

    def is_self_connected(self, index: int) -> bool:
        """
        Parameters:
            index: This neuron's index in the owning network

        Returns:
            True if one of the inbound links starts at this very neuron
        """
        return any(link.from_index == index for link in self.inbound_links)

    def __str__(self):
        return (f"[{self.type.value}{self.id},r={self.activation_response:.2f},"
                f"out={self.output:+.4f},links={len(self.inbound_links)}]")

    def __repr__(self):
        return (f"Neuron(neuron_id={self.id}, neuron_type=NeuronType.{self.type.name}, "
                f"activation_response={self.activation_response}, output={self.output})")
