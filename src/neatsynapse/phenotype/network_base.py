"""
NEAT Network Base Module

This module defines the abstract base class for networks built from an ordered
list of neurons connected by weighted links. It holds what every such network
shares: the neuron list, the layers on either side of the network, standard
introspection properties and visualization. Subclasses implement evaluation.

Classes:
    NetworkBase: Abstract base class defining the network interface
"""

import logging
from abc    import ABC, abstractmethod
from typing import Any, Iterable
import graphviz  # type: ignore

from neatsynapse.phenotype.neuron import Link, Neuron, NeuronType

logger = logging.getLogger(__name__)

class NetworkBase(ABC):
    """
    Abstract base class for neuron/link network implementations.

    The base class provides:
        - Ownership of the ordered neuron list
        - Access to the layers on either side of the network
        - Standard network introspection properties
        - Network visualization

    Public Properties:
        neurons:                The neurons, in evaluation order
        from_layer:             The layer feeding the network's inputs
        to_layer:               The layer receiving the network's outputs
        from_neuron_count:      Number of network inputs
        to_neuron_count:        Number of network outputs
        number_neurons:         Total number of neurons in the network
        number_neurons_hidden:  Number of hidden neurons in the network
        number_links:           Total number of links in the network
        number_links_recurrent: Number of links whose source is not evaluated before their destination

    Public Methods (must be implemented by subclasses):
        compute(inputs): Process inputs through the network and return outputs
        clone():         Return an independent copy of the network
    """

    def __init__(self, from_layer: Any, to_layer: Any, neurons: Iterable[Neuron]):
        """
        Parameters:
            from_layer: The input layer (anything with a 'neuron_count')
            to_layer:   The output layer (anything with a 'neuron_count')
            neurons:    The neurons making up the network, in evaluation order
        """
        self._from_layer = from_layer
        self._to_layer   = to_layer
        self._neurons    = list(neurons)

    @property
    def neurons(self) -> list[Neuron]:
        """The neurons making up the network, in evaluation order."""
        return self._neurons

    @neurons.setter
    def neurons(self, neurons: Iterable[Neuron]) -> None:
        self._neurons = list(neurons)

    @property
    def from_layer(self) -> Any:
        """The layer feeding the network's inputs."""
        return self._from_layer

    @from_layer.setter
    def from_layer(self, layer: Any) -> None:
        self._from_layer = layer

    @property
    def to_layer(self) -> Any:
        """The layer receiving the network's outputs."""
        return self._to_layer

    @to_layer.setter
    def to_layer(self, layer: Any) -> None:
        self._to_layer = layer

    @property
    def from_neuron_count(self) -> int:
        """Number of network inputs, as reported by the 'from' layer."""
        return self._from_layer.neuron_count

    @property
    def to_neuron_count(self) -> int:
        """Number of network outputs, as reported by the 'to' layer."""
        return self._to_layer.neuron_count

    @property
    def number_neurons(self) -> int:
        """Total number of neurons in the network."""
        return len(self._neurons)

    @property
    def number_neurons_hidden(self) -> int:
        """Number of hidden neurons in the network."""
        return sum(1 for neuron in self._neurons if neuron.type == NeuronType.HIDDEN)

    @property
    def number_links(self) -> int:
        """Total number of links in the network."""
        return sum(len(neuron.inbound_links) for neuron in self._neurons)

    @property
    def number_links_recurrent(self) -> int:
        """Number of links whose source neuron is evaluated at or after their destination."""
        return sum(1 for index, neuron in enumerate(self._neurons)
                     for link in neuron.inbound_links if link.from_index >= index)

    def source_of(self, link: Link) -> Neuron:
        """
        Parameters:
            link: A link belonging to one of this network's neurons

        Returns:
            The neuron the link starts from
        """
        return self._neurons[link.from_index]

    @abstractmethod
    def compute(self, inputs: Any) -> Any:
        """
        Process inputs through the network.

        Parameters:
            inputs: Network inputs (implementation-specific type)

        Returns:
            Network outputs (implementation-specific type)
        """
        pass

    @abstractmethod
    def clone(self) -> "NetworkBase":
        """Return an independent copy of the network."""
        pass

    def visualize(self, view: bool = True) -> graphviz.Digraph:
        """
        Visualize the network using Graphviz.

        Input and bias neurons are drawn on the left, output neurons on the right.
        Recurrent links (whose source is evaluated at or after their destination,
        self-connections included) are drawn dashed.

        Parameters:
            view: If True, automatically open the visualization after rendering

        Returns:
            graphviz.Digraph object representing the network
        """
        dot = graphviz.Digraph()
        dot.attr(rankdir='LR')
        dot.attr('graph', labelloc='t')

        common = {'color': 'black', 'style': 'filled', 'shape': 'circle', 'penwidth': '0.5',
                  'fontsize': '5', 'width': '0.5', 'height': '0.5', 'fixedsize': 'true'}
        fill   = {NeuronType.INPUT : 'lightgrey',
                  NeuronType.BIAS  : 'khaki',
                  NeuronType.HIDDEN: 'lightblue',
                  NeuronType.OUTPUT: 'white'}
        clusters = [('cluster_input' , 'source', 'Inputs' , (NeuronType.INPUT, NeuronType.BIAS)),
                    ('cluster_hidden', 'same'  , 'Hidden' , (NeuronType.HIDDEN,)),
                    ('cluster_output', 'sink'  , 'Outputs', (NeuronType.OUTPUT,))]

        for name, rank, label, types in clusters:
            members = [neuron for neuron in self._neurons if neuron.type in types]
            if not members:
                continue
            with dot.subgraph(name=name) as cluster:
                cluster.attr(rank=rank, label=label, style='invisible')
                for neuron in members:
                    attrs = dict(common, fillcolor=fill[neuron.type])
                    attrs['label'] = f"id={neuron.id}\\nr={neuron.activation_response:.2f}"
                    cluster.node(str(neuron.id), **attrs)

        for index, neuron in enumerate(self._neurons):
            for link in neuron.inbound_links:
                edge_attrs = {
                    'label'     : f"w={link.weight:.2f}",
                    'fontsize'  : '5',
                    'penwidth'  : '0.5',
                    'arrowsize' : '0.5',
                    'labelfloat': 'false',
                    'color'     : 'black',
                    'style'     : 'dashed' if link.from_index >= index else 'solid'
                }
                dot.edge(str(self.source_of(link).id), str(neuron.id), **edge_attrs)

        logger.debug("Rendered network with %d neurons and %d links", self.number_neurons, self.number_links)

        if view:
            dot.view(cleanup=True)

        return dot
