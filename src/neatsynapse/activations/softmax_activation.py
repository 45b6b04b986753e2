"""
Softmax Activation Module

The normalized exponential maps a slice of values to a probability
distribution over the same slice:

    m   = max(x)
    e_i = exp(x_i - m)
    y_i = e_i / sum(e)

Subtracting the maximum keeps every exponent <= 0, so the computation cannot
overflow, and the largest term is exactly 1, so the sum cannot vanish.

Classes:
    SoftmaxActivation: Normalized exponential activation function
"""

import numpy as np
from typing import MutableSequence

from neatsynapse.activations.activation_function import ActivationFunction

class SoftmaxActivation(ActivationFunction):
    """
    Normalized exponential ("softmax") activation function.

    Applied to a slice, every output is >= 0 and the outputs sum to 1. Applied
    to a single value (as the network evaluators do) it always yields 1.0.

    The derivative keeps the per element signature shared by all activation
    functions and returns 1.0. Softmax couples every element of the slice, so
    its true derivative is a Jacobian which this signature cannot express.
    """

    name = "softmax"

    def apply(self, values: MutableSequence[float], start: int = 0, size: int | None = None) -> None:
        end = self._slice_end(values, start, size)
        if end == start:
            return

        segment = np.asarray(values[start:end], dtype=np.float64)
        with np.errstate(over='ignore', under='ignore'):
            exps = np.exp(segment - np.max(segment))
        values[start:end] = exps / np.sum(exps)

    def derivative(self, x: float, fx: float) -> float:
        return 1.0
