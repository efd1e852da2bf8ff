import numpy as np

# Input offset of the shifted variants
SHIFT_OFFSET = 0.5

# Slope of the leaky ReLU for non-positive inputs
LEAKY_RELU_SLOPE = 0.001

# S-shaped ReLU: identity between the thresholds, leak beyond them
SRELU_LEFT_THRESHOLD  = 0.001
SRELU_RIGHT_THRESHOLD = 0.999
SRELU_LEAK            = 0.00001

# Negative slope of the fixed-slope ReLU
FIXED_RELU_SLOPE = 2.365

def relu_activation(z):
    # not np.maximum: NaN maps to 0.0 like any non-positive input
    return np.where(z > 0.0, z, 0.0)

def leaky_relu_activation(z):
    return np.where(z > 0.0, z, z * LEAKY_RELU_SLOPE)

def leaky_relu_shifted_activation(z):
    # offset is applied before the branch
    s = z + SHIFT_OFFSET
    return np.where(s > 0.0, s, s * LEAKY_RELU_SLOPE)

def _saturating_identity(x):
    tl, tr = SRELU_LEFT_THRESHOLD, SRELU_RIGHT_THRESHOLD
    left   = tl + (x - tl) * SRELU_LEAK
    right  = tr + (x - tr) * SRELU_LEAK
    return np.where((x > tl) & (x < tr), x, np.where(x <= tl, left, right))

def srelu_activation(z):
    return _saturating_identity(z)

def srelu_shifted_activation(z):
    # thresholds are compared against the shifted input
    return _saturating_identity(z + SHIFT_OFFSET)

def parametric_relu_activation(z, a):
    return np.where(z < 0, a * z, z)

def fixed_slope_relu_activation(z):
    # negative side is steeper than the identity
    return np.where(z < 0, FIXED_RELU_SLOPE * z, z)

def max_minus_one_activation(z):
    return np.where(z > -1.0, z, -1.0)

def binary_step_activation(z):
    # 0 is on the 'on' side of the step
    return np.where(z < 0, 0.0, 1.0)
