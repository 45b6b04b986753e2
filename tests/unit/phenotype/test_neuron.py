"""
Unit tests for the neuron module (NeuronType, Link, Neuron) and Layer.
"""

import pytest
from neatsynapse.phenotype import Layer, Link, Neuron, NeuronType


class TestNeuronType:
    """Test NeuronType enumeration."""

    def test_values(self):
        assert NeuronType.INPUT.value  == "I"
        assert NeuronType.BIAS.value   == "B"
        assert NeuronType.HIDDEN.value == "H"
        assert NeuronType.OUTPUT.value == "O"

    def test_four_types(self):
        assert len(NeuronType) == 4


class TestLink:
    """Test Link class."""

    def test_init(self):
        link = Link(0.5, 3)
        assert link.weight == 0.5
        assert link.from_index == 3

    def test_weight_mutable(self):
        link = Link(0.5, 3)
        link.weight = -2.0
        assert link.weight == -2.0

    def test_copy_independent(self):
        link = Link(0.5, 3)
        copy = link.copy()
        copy.weight = 1.0

        assert copy is not link
        assert copy.from_index == 3
        assert link.weight == 0.5

    def test_no_arbitrary_attributes(self):
        link = Link(0.5, 3)
        with pytest.raises(AttributeError):
            link.from_neuron = None

    def test_repr(self):
        assert repr(Link(0.5, 3)) == "Link(weight=+0.500000, from_index=3)"


class TestNeuron:
    """Test Neuron class."""

    def test_defaults(self):
        neuron = Neuron(4, NeuronType.HIDDEN)
        assert neuron.id == 4
        assert neuron.type == NeuronType.HIDDEN
        assert neuron.activation_response == 1.0
        assert neuron.output == 0.0
        assert neuron.inbound_links == []

    def test_inbound_links_stored_as_list(self):
        links = (Link(1.0, 0), Link(2.0, 1))
        neuron = Neuron(2, NeuronType.OUTPUT, 1.0, links)
        assert neuron.inbound_links == list(links)

    def test_link_order_preserved(self):
        links = [Link(float(i), i) for i in range(5)]
        neuron = Neuron(9, NeuronType.HIDDEN, 1.0, links)
        assert [link.from_index for link in neuron.inbound_links] == [0, 1, 2, 3, 4]

    def test_copy(self):
        neuron = Neuron(2, NeuronType.OUTPUT, 0.5, [Link(1.0, 0)], output=0.25)
        copy = neuron.copy()

        assert copy is not neuron
        assert copy.id == 2
        assert copy.type == NeuronType.OUTPUT
        assert copy.activation_response == 0.5
        assert copy.output == 0.25
        assert copy.inbound_links[0] is not neuron.inbound_links[0]

    def test_copy_links_independent(self):
        neuron = Neuron(2, NeuronType.OUTPUT, 1.0, [Link(1.0, 0)])
        copy = neuron.copy()
        copy.inbound_links[0].weight = 5.0
        copy.inbound_links.append(Link(1.0, 2))

        assert neuron.inbound_links[0].weight == 1.0
        assert len(neuron.inbound_links) == 1

    def test_is_self_connected(self):
        neuron = Neuron(7, NeuronType.HIDDEN, 1.0, [Link(1.0, 0), Link(0.3, 2)])
        assert neuron.is_self_connected(2)
        assert not neuron.is_self_connected(1)

    def test_str(self):
        neuron = Neuron(3, NeuronType.OUTPUT, 1.0, [Link(1.0, 0)], output=0.5)
        assert str(neuron) == "[O3,r=1.00,out=+0.5000,links=1]"

    def test_repr(self):
        assert "NeuronType.BIAS" in repr(Neuron(1, NeuronType.BIAS))


class TestLayer:
    """Test Layer class."""

    def test_neuron_count(self):
        assert Layer(3).neuron_count == 3

    def test_empty_layer(self):
        assert Layer(0).neuron_count == 0

    def test_negative_size(self):
        with pytest.raises(ValueError):
            Layer(-1)
