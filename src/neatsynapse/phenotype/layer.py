"""
NEAT Layer Module

A NEAT network sits between two layers: the layer feeding its inputs and the
layer receiving its outputs. The network only needs each layer's neuron count.

Classes:
    Layer: A layer of neurons, described by its size
"""

class Layer:
    """
    A layer connected to a NEAT network.

    Public Attributes:
        neuron_count: Number of neurons in the layer
    """

    def __init__(self, neuron_count: int):
        """
        Parameters:
            neuron_count: Number of neurons in the layer

        Raises:
            ValueError: If 'neuron_count' is negative
        """
        if neuron_count < 0:
            raise ValueError(f"Layer size must be >= 0, got {neuron_count}")
        self.neuron_count: int = neuron_count

    def __repr__(self):
        return f"Layer(neuron_count={self.neuron_count})"
