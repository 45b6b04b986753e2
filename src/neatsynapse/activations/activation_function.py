"""
Activation Function Module

This module defines the activation function abstraction used by the network
evaluators. An activation function is a stateless object that transforms a
contiguous slice of values in place and can report a derivative at a point.
Because it holds no state, a single instance may be shared by many networks;
'clone()' produces an independent instance for callers that want one.

Classes:
    ActivationFunction:    Abstract base class for activation functions
    ElementwiseActivation: Applies one of the basic kernels to each value
"""

import numpy as np
from abc      import ABC, abstractmethod
from autograd import grad  # type: ignore
from typing   import Any, MutableSequence

from neatsynapse.activations.basic_activations import kernels

class ActivationFunction(ABC):
    """
    Abstract base class for activation functions.

    Public Attributes:
        name: Registry name of the activation function

    Public Methods:
        apply(values, start, size): Transform values[start:start+size] in place
        derivative(x, fx):          Derivative at 'x', given the activated value 'fx'
        has_derivative():           Whether 'derivative' is meaningful
        clone():                    A new, independent instance
    """

    name: str = ""

    @abstractmethod
    def apply(self, values: MutableSequence[float], start: int = 0, size: int | None = None) -> None:
        """
        Transform a slice of 'values' in place.

        Parameters:
            values: Numpy array or list holding the values to transform
            start:  Index of the first value to transform
            size:   Number of values to transform (None: up to the end)

        Raises:
            IndexError: If the slice does not fit inside 'values'
            TypeError:  If 'values' is a numpy array without a floating dtype
        """
        pass

    @abstractmethod
    def derivative(self, x: float, fx: float) -> float:
        """
        Parameters:
            x:  The value the function was applied to
            fx: The activated value

        Returns:
            The derivative of the activation function at 'x'
        """
        pass

    def has_derivative(self) -> bool:
        return True

    def clone(self) -> "ActivationFunction":
        return type(self)()

    @staticmethod
    def _slice_end(values: MutableSequence[float], start: int, size: int | None) -> int:
        """
        Validate the slice [start, start+size) and return its end index.

        Numpy arrays must have a floating dtype: writing the transformed values
        back into an integer array would silently truncate them.
        """
        if isinstance(values, np.ndarray) and not np.issubdtype(values.dtype, np.floating):
            raise TypeError(f"Expected a floating point array, got dtype {values.dtype}")
        end = len(values) if size is None else start + size
        if start < 0 or end < start or end > len(values):
            raise IndexError(f"Slice [{start}:{end}] out of range for {len(values)} values")
        return end

    def __repr__(self):
        return f"{type(self).__name__}()"

class ElementwiseActivation(ActivationFunction):
    """
    Activation function applying a basic kernel independently to every value.

    The derivative is the exact derivative of the kernel at 'x', obtained
    with autograd. The activated value 'fx' is accepted but not needed.
    """

    def __init__(self, name: str):
        """
        Parameters:
            name: Name of the kernel (a key of 'basic_activations.kernels')

        Raises:
            ValueError: If no kernel is registered under 'name'
        """
        if name not in kernels:
            raise ValueError(f"Unknown activation function '{name}'")

        self.name      = name
        self._kernel   = kernels[name]
        self._gradient = grad(self._kernel)

    def apply(self, values: MutableSequence[float], start: int = 0, size: int | None = None) -> None:
        end = self._slice_end(values, start, size)
        segment = np.asarray(values[start:end], dtype=np.float64)
        values[start:end] = self._kernel(segment)

    def derivative(self, x: float, fx: Any = None) -> float:
        return float(self._gradient(float(x)))

    def clone(self) -> "ElementwiseActivation":
        return ElementwiseActivation(self.name)

    def __repr__(self):
        return f"ElementwiseActivation({self.name!r})"
