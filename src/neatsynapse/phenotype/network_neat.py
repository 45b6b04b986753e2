"""
NEAT Network Module

This module implements the evaluator for networks whose topology was evolved
by NEAT. The network is a flat, ordered list of neurons; each neuron pulls the
current output of its source neurons through weighted links. There is no
topological sort and no cycle detection: a link to a neuron evaluated later in
the sweep (or to the neuron itself) simply reads the value that neuron held
before the sweep. This lets one loop evaluate feedforward, recurrent and
self-connected topologies alike.

Two evaluation modes are supported:
    - normal:   one sweep per call. Neuron outputs persist between calls and act
                as the memory of recurrent links.
    - snapshot: 'network_depth' sweeps per call, letting recurrent signals settle,
                after which every neuron output is reset to 0.

Networks are not thread-safe: concurrent calls to 'compute' on the same
instance must be serialized by the caller. Use 'clone()' to obtain an
independent network for parallel evaluation.

Classes:
    NetworkNEAT: Evaluator for NEAT networks with arbitrary topology
"""

import logging
import operator
import warnings
import numpy as np
from typing import Any, Iterable, Sequence

from neatsynapse.activations            import ActivationFunction, create_activation
from neatsynapse.errors                 import UnsupportedRepresentationError
from neatsynapse.phenotype.layer        import Layer
from neatsynapse.phenotype.network_base import NetworkBase
from neatsynapse.phenotype.neuron       import Link, Neuron, NeuronType
from neatsynapse.run.config             import Config

logger = logging.getLogger(__name__)

class NetworkNEAT(NetworkBase):
    """
    Evaluator for a NEAT network sitting between an input and an output layer.

    The neuron list must start with all input neurons, followed by exactly one
    bias neuron, followed by the hidden and output neurons in evaluation order.
    This ordering is not checked here ('from_dict' validates it). Outputs are
    reported in the order output neurons appear in the list.

    Public Methods:
        compute(inputs):              Process one input vector and return the output vector
        reset():                      Set the output of every neuron to 0
        clone():                      Independent deep copy of the network
        from_dict(description):       Build a network from a topology description
        get_property(name):           Read a persisted property by name
        set_property(name, value):    Write a persisted property by name

    Public Properties:
        activation_function: Activation applied to every hidden and output neuron
        network_depth:       Number of sweeps per call in snapshot mode
        snapshot:            Whether to evaluate in snapshot mode
        matrix:              Unsupported, raises UnsupportedRepresentationError
        matrix_size:         Always 0
        is_teachable:        Always False, weights cannot be trained as a matrix
        is_self_connected:   Always False, the 'from' and 'to' layers differ
        description, name:   Always None

    Public Properties (inherited from NetworkBase):
        neurons, from_layer, to_layer, from_neuron_count, to_neuron_count,
        number_neurons, number_neurons_hidden, number_links, number_links_recurrent
    """

    # Properties an external serializer reads and writes by name
    PERSISTED_PROPERTIES = ('neurons', 'activation_function', 'network_depth', 'snapshot',
                            'from_layer', 'to_layer')

    # Layers are re-linked by the serializer's own topology reconstruction
    PERSIST_IGNORE = ('from_layer', 'to_layer')

    _NEURON_TYPES = {
        "input" : NeuronType.INPUT,
        "bias"  : NeuronType.BIAS,
        "hidden": NeuronType.HIDDEN,
        "output": NeuronType.OUTPUT
        }

    def __init__(self,
                 from_layer         : Any,
                 to_layer           : Any,
                 neurons            : Iterable[Neuron],
                 activation_function: ActivationFunction,
                 network_depth      : int,
                 snapshot           : bool = False):
        """
        Parameters:
            from_layer:          The input layer (anything with a 'neuron_count')
            to_layer:            The output layer (anything with a 'neuron_count')
            neurons:             The neurons, inputs first, then the bias, then the rest
            activation_function: Activation applied to every hidden and output neuron
            network_depth:       Number of sweeps per call in snapshot mode
            snapshot:            Whether to evaluate in snapshot mode

        Raises:
            TypeError:  If 'network_depth' is not an integer
            ValueError: If 'network_depth' < 1
        """
        super().__init__(from_layer, to_layer, neurons)
        self.activation_function = activation_function
        self.network_depth       = network_depth
        self.snapshot            = snapshot

        logger.debug("Created %r", self)

    @property
    def activation_function(self) -> ActivationFunction:
        """Activation applied to every hidden and output neuron."""
        return self._activation_function

    @activation_function.setter
    def activation_function(self, activation_function: ActivationFunction) -> None:
        self._activation_function = activation_function

    @property
    def network_depth(self) -> int:
        """Number of sweeps per call in snapshot mode."""
        return self._network_depth

    @network_depth.setter
    def network_depth(self, network_depth: int) -> None:
        network_depth = operator.index(network_depth)
        if network_depth < 1:
            raise ValueError(f"network_depth must be >= 1, got {network_depth}")
        self._network_depth = network_depth

    @property
    def snapshot(self) -> bool:
        """Whether each call sweeps 'network_depth' times and then clears all neuron outputs."""
        return self._snapshot

    @snapshot.setter
    def snapshot(self, snapshot: bool) -> None:
        self._snapshot = bool(snapshot)

    def compute(self, inputs: Sequence[float]) -> np.ndarray:
        """
        Compute the network outputs for one input vector.

        Each sweep seeds the input neurons, sets the bias neuron to 1 and then
        evaluates every other neuron in stored order as:
            activation(sum(link.weight * source.output) / activation_response)
        A zero activation response yields inf/nan, which propagate unchanged.

        Parameters:
            inputs: The network inputs (as many as the 'from' layer has neurons)

        Returns:
            The outputs computed by the final sweep, shape (to_neuron_count,)

        Raises:
            ValueError: If the number of inputs does not match the 'from' layer
        """
        inputs = np.asarray(inputs, dtype=np.float64)
        if inputs.ndim != 1:
            raise ValueError(f"Input must be a 1D vector, got {inputs.ndim}D")
        if len(inputs) != self.from_neuron_count:
            raise ValueError(f"Expected {self.from_neuron_count} inputs, got {len(inputs)}")

        neurons     = self._neurons
        activation  = self._activation_function
        result      = np.zeros(self.to_neuron_count, dtype=np.float64)
        buffer      = np.zeros(1, dtype=np.float64)
        flush_count = self._network_depth if self._snapshot else 1

        try:
            with np.errstate(divide='ignore', invalid='ignore'):
                for _ in range(flush_count):
                    result.fill(0.0)
                    output_index = 0

                    # Seed the input neurons
                    index = 0
                    while index < len(neurons) and neurons[index].type == NeuronType.INPUT:
                        neurons[index].output = float(inputs[index])
                        index += 1

                    # The bias neuron
                    neurons[index].output = 1.0
                    index += 1

                    while index < len(neurons):
                        neuron = neurons[index]

                        total = 0.0
                        for link in neuron.inbound_links:
                            total += link.weight * neurons[link.from_index].output

                        buffer[0] = np.divide(total, neuron.activation_response)
                        activation.apply(buffer)
                        neuron.output = float(buffer[0])

                        if neuron.type == NeuronType.OUTPUT:
                            result[output_index] = neuron.output
                            output_index += 1
                        index += 1
        finally:
            # A failed snapshot call must not leave partial outputs behind
            if self._snapshot:
                self.reset()

        return result

    def reset(self) -> None:
        """Set the output of every neuron to 0, erasing the recurrent memory."""
        for neuron in self._neurons:
            neuron.output = 0.0

    def clone(self) -> "NetworkNEAT":
        """
        Return an independent copy of the network.

        Neurons, links and the activation function are copied; links keep their
        indices and so refer to the copied neurons. The layers are shared.
        """
        return NetworkNEAT(self._from_layer,
                           self._to_layer,
                           [neuron.copy() for neuron in self._neurons],
                           self._activation_function.clone(),
                           self._network_depth,
                           self._snapshot)

    @property
    def matrix(self) -> Any:
        """A NEAT network has no weight matrix."""
        raise UnsupportedRepresentationError(type(self).__name__)

    @matrix.setter
    def matrix(self, matrix: Any) -> None:
        raise UnsupportedRepresentationError(type(self).__name__)

    @property
    def matrix_size(self) -> int:
        return 0

    @property
    def is_teachable(self) -> bool:
        return False

    @property
    def is_self_connected(self) -> bool:
        return False

    @property
    def description(self) -> None:
        return None

    @property
    def name(self) -> None:
        return None

    def get_property(self, name: str) -> Any:
        """
        Parameters:
            name: One of PERSISTED_PROPERTIES

        Raises:
            AttributeError: If 'name' is not a persisted property
        """
        self._check_property(name)
        return getattr(self, name)

    def set_property(self, name: str, value: Any) -> None:
        """
        Parameters:
            name:  One of PERSISTED_PROPERTIES
            value: The new value

        Raises:
            AttributeError: If 'name' is not a persisted property
        """
        self._check_property(name)
        setattr(self, name, value)

    def _check_property(self, name: str) -> None:
        if name not in self.PERSISTED_PROPERTIES:
            raise AttributeError(f"'{type(self).__name__}' has no persisted property '{name}'")

    @classmethod
    def from_dict(cls, description: dict, config: Config | None = None) -> "NetworkNEAT":
        """
        Create a network from a dictionary description.

        Dictionary format:
            {
                "activation": "sigmoid",   # Optional, defaults to config.activation
                "network_depth": 3,        # Optional, defaults to config.network_depth
                "snapshot": false,         # Optional, defaults to config.snapshot
                "neurons": [
                    {"id": 0, "type": "input"},
                    {"id": 1, "type": "input"},
                    {"id": 2, "type": "bias"},
                    {"id": 3, "type": "hidden", "activation_response": 0.5},
                    {"id": 4, "type": "output"}
                ],
                "links": [
                    {"from": 0, "to": 3, "weight":  0.5},
                    {"from": 3, "to": 3, "weight": -0.3},
                    {"from": 3, "to": 4, "weight":  1.5}
                ]
            }

        Neurons are evaluated in the order listed. Links refer to neurons by id
        and may point forwards or to their own destination. Neurons without an
        "activation_response" use config.activation_response.

        Parameters:
            description: Dictionary describing the network
            config:      Default parameters (a default Config if None)

        Returns:
            A new NetworkNEAT, between layers sized by its input and output neurons

        Raises:
            ValueError: If the description is invalid (ordering, unknown ids, etc.)
            KeyError:   If required fields are missing from the dictionary
            TypeError:  If "network_depth" is not an integer
        """
        if config is None:
            config = Config()

        neurons_data = description["neurons"]
        types = []
        for data in neurons_data:
            if data["type"] not in cls._NEURON_TYPES:
                raise ValueError(f"Invalid neuron type '{data['type']}'")
            types.append(cls._NEURON_TYPES[data["type"]])
        cls._validate_ordering(types)

        neurons  = []
        index_of = {}
        for data, neuron_type in zip(neurons_data, types):
            neuron_id = data["id"]
            if neuron_id in index_of:
                raise ValueError(f"Duplicate neuron id {neuron_id}")
            index_of[neuron_id] = len(neurons)

            response = data.get("activation_response", config.activation_response)
            if response == 0:
                warnings.warn(f"Neuron {neuron_id} has a zero activation response, its output will not be finite",
                              RuntimeWarning)
            neurons.append(Neuron(neuron_id, neuron_type, response))

        for data in description.get("links", []):
            for key in ("from", "to"):
                if data[key] not in index_of:
                    raise ValueError(f"Link refers to unknown neuron {data[key]}")
            target = neurons[index_of[data["to"]]]
            if target.type in (NeuronType.INPUT, NeuronType.BIAS):
                raise ValueError(f"Link cannot feed {target.type.name} neuron {target.id}")
            target.inbound_links.append(Link(data["weight"], index_of[data["from"]]))

        num_inputs  = types.count(NeuronType.INPUT)
        num_outputs = types.count(NeuronType.OUTPUT)
        logger.debug("Building network: %d inputs, %d outputs, %d neurons",
                     num_inputs, num_outputs, len(neurons))

        return cls(Layer(num_inputs),
                   Layer(num_outputs),
                   neurons,
                   create_activation(description.get("activation", config.activation)),
                   description.get("network_depth", config.network_depth),
                   description.get("snapshot", config.snapshot))

    @staticmethod
    def _validate_ordering(types: list[NeuronType]) -> None:
        """
        Check that input neurons come first, followed by exactly one bias neuron.

        Raises:
            ValueError: If the ordering is violated
        """
        num_inputs = 0
        while num_inputs < len(types) and types[num_inputs] == NeuronType.INPUT:
            num_inputs += 1

        if num_inputs == len(types) or types[num_inputs] != NeuronType.BIAS:
            raise ValueError("A bias neuron must immediately follow the input neurons")

        for neuron_type in types[num_inputs + 1:]:
            if neuron_type in (NeuronType.INPUT, NeuronType.BIAS):
                raise ValueError(f"{neuron_type.name} neuron found after the bias neuron")

    def __str__(self):
        neuron_info = [f"  {neuron}" for neuron in self._neurons]
        link_info   = [f"  {self.source_of(link).id:02d}=>{neuron.id:02d}, w={link.weight:+.2f}"
                       for neuron in self._neurons for link in neuron.inbound_links]
        return "\n".join(neuron_info) + "\n\n" + "\n".join(link_info)

    def __repr__(self):
        return (f"NetworkNEAT(neurons={self.number_neurons}, "
                f"hidden={self.number_neurons_hidden}, "
                f"links={self.number_links}, "
                f"depth={self._network_depth}, snapshot={self._snapshot})")
