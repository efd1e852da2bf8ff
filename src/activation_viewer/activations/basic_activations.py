import numpy as np

# SELU parameters, from "Self-Normalizing Neural Networks" (Klambauer et al., 2017)
SELU_ALPHA = 1.6732632423543772848170429916717
SELU_SCALE = 1.0507009873554804934193349852946

# Normalization factor applied to the shifted arcsinh
ARCSINH_SCALE = 1.2567348023993685

def logistic_steep_activation(z):
    # exp overflows to inf for z < -144.8, which correctly yields 0.0
    with np.errstate(over='ignore'):
        return 1.0 / (1.0 + np.exp(-4.9 * z))

def logistic_sigmoid_activation(z):
    # Saturate outside [-40, 40]; the clip only keeps the discarded branch finite
    Z = np.clip(z, -40.0, 40.0)
    y = 1.0 / (1.0 + np.exp(-Z))
    return np.where(z < -40.0, 0.0, np.where(z > 40.0, 1.0, y))

def soft_sign_activation(z):
    # 0.2 offset keeps the denominator away from zero.
    # Returns 0.5 once 2*(0.2+|z|) overflows (|z| > ~9e307).
    with np.errstate(over='ignore', invalid='ignore'):
        return 0.5 + (z / (2.0 * (0.2 + np.abs(z))))

def arctan_activation(z):
    return (np.arctan(z) + np.pi / 2.0) * 1.0 / np.pi

def tanh_activation(z):
    return (np.tanh(z) + 1.0) * 0.5

def _asinh(z):
    # Explicit log form, not np.arcsinh. For large negative z the sum
    # z + sqrt(z^2 + 1) cancels to 0 (z < ~-1e8) and the log returns -inf.
    with np.errstate(over='ignore', divide='ignore', invalid='ignore'):
        return np.log(z + np.sqrt((z * z) + 1.0))

def arcsinh_activation(z):
    return ARCSINH_SCALE * ((_asinh(z) + 1.0) * 0.5)

def selu_activation(z):
    # exp(z) is only used for z < 0; silence overflow from the discarded branch
    with np.errstate(over='ignore', invalid='ignore'):
        negative = SELU_SCALE * ((SELU_ALPHA * np.exp(z)) - SELU_ALPHA)
    return np.where(z >= 0, SELU_SCALE * z, negative)

def bent_identity_activation(z):
    # z**2 overflows to inf for |z| > ~1.3e154, output follows (inf or nan)
    with np.errstate(over='ignore', invalid='ignore'):
        return ((np.sqrt(z ** 2 + 1.0) - 1.0) / 2.0) + z
