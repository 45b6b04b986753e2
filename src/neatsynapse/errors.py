"""
Exceptions raised by the neatsynapse package.

Bad arguments (wrong input length, invalid network depth, malformed topology
descriptions) are reported with the builtin ValueError. The classes here cover
requests that can never succeed for a given network type.

Classes:
    NeuralNetworkError:             Base class for package specific errors
    UnsupportedRepresentationError: The network has no dense matrix form
"""

class NeuralNetworkError(Exception):
    """Base class for errors raised by neatsynapse."""

class UnsupportedRepresentationError(NeuralNetworkError):
    """
    Raised when a sparse, link based network is treated as a dense weight matrix.
    """

    def __init__(self, network_type: str):
        super().__init__(f"{network_type} has no weight matrix representation")
        self.network_type = network_type
