"""
Approximant Activation Functions Module.

This module collects the activation functions that trade a small, known
amount of accuracy for avoiding a call to a transcendental routine:

    fast_exp                          : IEEE-754 bit-trick approximation of e^x
    logistic_approximant_steep_activation : steep logistic built on fast_exp
    polynomial_approximant_activation : rational approximation of the steep logistic
    quadratic_sigmoid_activation      : piecewise quadratic saturating curve

All functions are elementwise: they accept a scalar or an array of any shape
and return values of the same shape.
"""

import numpy as np

# ===========================
# Fast Exponential Bit-Trick
# ===========================
# Schraudolph, "A Fast, Compact Approximation of the Exponential Function" (1999).
# The upper 32 bits of an IEEE-754 double hold the sign, the biased exponent and
# the top of the mantissa. Writing a linear function of x there makes the exponent
# field grow by one for every ln(2) step in x, i.e. the double reads as ~e^x.

# 2^20 / ln(2): one unit of x moves the exponent field by 1/ln(2)
EXP_A = 1512775

# Exponent bias (1023 << 20) minus the correction that minimises the RMS error
EXP_B = 1072693248 - 60801

def fast_exp(val):
    """
    Approximate e^val by constructing the bit pattern of a double.

    Computes t = int64(EXP_A * val + EXP_B) (truncated toward zero), shifts it
    left by 32 bits and reinterprets the resulting 64 bits as a float64.

    The relative error stays within a few percent for moderate |val|. Outside
    roughly [-700, 700] the exponent field leaves its valid range and the 64-bit
    shift wraps around, so the result is meaningless (but finite or inf, never
    an exception). NaN input maps to the bit pattern of INT64_MIN << 32, i.e. 0.0.

    Parameters:
        val: scalar or array of float64 values

    Returns:
        float64 approximation of e^val, with the shape of val
    """
    val   = np.asarray(val, dtype=np.float64)
    shape = val.shape

    # out-of-range and NaN casts produce INT64_MIN; they are part of the error profile
    with np.errstate(invalid='ignore', over='ignore'):
        t = np.atleast_1d(EXP_A * val + EXP_B).astype(np.int64)

    # shift the two's complement bits; bits above 64 are dropped
    bits = np.left_shift(t.view(np.uint64), np.uint64(32))
    return bits.view(np.float64).reshape(shape)

# ==========================
# Approximant Sigmoid Curves
# ==========================

def logistic_approximant_steep_activation(z):
    """
    Steep logistic 1/(1 + e^(-4.9z)) evaluated with 'fast_exp'.

    Deviates from 'logistic_steep_activation' by less than 0.02 on [-2, 2];
    the deviation follows the error curve of 'fast_exp' and grows with |4.9z|.
    """
    with np.errstate(over='ignore'):
        return 1.0 / (1.0 + fast_exp(-4.9 * z))

def polynomial_approximant_activation(z):
    """
    Rational approximation of the steep logistic which avoids exponentiation.

    With u = 4.9z:
        e = 1 + |u| + 0.555u^2 + 0.143u^4
        f = 1/e if u > 0 else e
        y = 1/(1 + f)
    """
    with np.errstate(over='ignore', divide='ignore'):
        u  = z * 4.9
        u2 = u * u
        e  = 1.0 + np.abs(u) + u2 * 0.555 + u2 * u2 * 0.143
        f  = np.where(u > 0, 1.0 / e, e)
        return 1.0 / (1.0 + f)

def quadratic_sigmoid_activation(z):
    """
    Piecewise quadratic saturating curve, mirrored through the origin by sign(z).

    For |z| < t the curve is the parabola t - (|z| - t)^2; beyond t it continues
    as a line of slope a. The result is mapped onto (0, 1) as y*sign(z)*0.5 + 0.5,
    so z = 0 gives exactly 0.5. The tail keeps growing, so very large |z| leaves
    [0, 1] slightly (about 0.5 + 0.5*a*|z|).
    """
    t = 0.999     # breakpoint
    a = 0.00001   # slope of the linear tail

    sign = np.sign(z)
    x    = np.abs(z)

    with np.errstate(over='ignore'):
        y = np.where(x < t, t - ((x - t) * (x - t)), t + (x - t) * a)

    return (y * sign * 0.5) + 0.5
