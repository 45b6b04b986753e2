"""
Basic activation kernels.

Every kernel maps a scalar or an array to a value of the same shape and is
written with 'autograd.numpy', so that its exact derivative can be obtained
with 'autograd.grad' (see ElementwiseActivation).

A network feeds its kernels unbounded weighted sums, so kernels built on
powers, exponentials or reciprocals clip their argument to a range where the
result is still a finite float64. The bounds are the module constants below.

Exported:
    kernels: Dictionary mapping kernel names to functions
"""

import autograd.numpy as np  # type: ignore

# Slope of the NEAT sigmoid; gives a derivative of ~1.23 at the origin
SIGMOID_SLOPE = 4.924273

# exp(100) is about 2.7e43, far below the float64 maximum of 1.8e308
EXP_BOUND = 100.0

# 1e154**2 and 1e102**3 are both 1e306, still representable
SQUARE_BOUND = 1e154
CUBE_BOUND   = 1e102

# Smallest magnitude accepted by log and inverse; log(1e-7) is about -16.1
EPSILON = 1e-7

# Saturating kernels: output bounded whatever the input

def sigmoid_kernel(z):
    return 1.0 / (1.0 + np.exp(-np.clip(SIGMOID_SLOPE * z, -EXP_BOUND, EXP_BOUND)))

def tanh_kernel(z):
    return np.tanh(z)

def clamped_kernel(z):
    return np.clip(z, -1.0, 1.0)

def sin_kernel(z):
    return np.sin(z)

# Piecewise linear kernels

def identity_kernel(z):
    return z

def relu_kernel(z):
    return np.maximum(0.0, z)

def abs_kernel(z):
    return np.abs(z)

# Unbounded kernels, clipped to stay finite

def square_kernel(z):
    return np.clip(z, -SQUARE_BOUND, SQUARE_BOUND) ** 2

def cubed_kernel(z):
    return np.clip(z, -CUBE_BOUND, CUBE_BOUND) ** 3

def exponential_kernel(z):
    return np.exp(np.clip(z, -EXP_BOUND, EXP_BOUND))

def log_kernel(z):
    # Non-positive inputs read as EPSILON
    return np.log(np.maximum(z, EPSILON))

def inverse_kernel(z):
    # Inputs closer to 0 than EPSILON are pushed out to +/-EPSILON, zero to
    # +EPSILON, so the output magnitude never exceeds 1/EPSILON
    z_safe = np.where(np.abs(z) < EPSILON, np.where(z < 0, -EPSILON, EPSILON), z)
    return 1.0 / z_safe

kernels = {
    "identity"   : identity_kernel,
    "clamped"    : clamped_kernel,
    "relu"       : relu_kernel,
    "sigmoid"    : sigmoid_kernel,
    "tanh"       : tanh_kernel,
    "sin"        : sin_kernel,
    "square"     : square_kernel,
    "cubed"      : cubed_kernel,
    "log"        : log_kernel,
    "inverse"    : inverse_kernel,
    "exponential": exponential_kernel,
    "abs"        : abs_kernel
    }
