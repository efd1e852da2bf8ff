"""
Activations Package

This package provides the scalar activation functions displayed by the viewer.
Every function is elementwise: it accepts a float or a numpy array.

Exported:
    activations:            Dictionary mapping activation names to unary functions
    parametric_activations: Dictionary mapping activation names to functions f(z, a)
    activation_identifiers: Dictionary mapping activation names to CamelCase identifiers
    label_from_identifier, activation_label, get_activation: catalogue helpers
    fast_exp:               IEEE-754 bit-trick approximation of e^x
    Individual activation functions: logistic_steep_activation, logistic_approximant_steep_activation,
                                     logistic_sigmoid_activation, soft_sign_activation,
                                     polynomial_approximant_activation, quadratic_sigmoid_activation,
                                     relu_activation, leaky_relu_activation, leaky_relu_shifted_activation,
                                     srelu_activation, srelu_shifted_activation, parametric_relu_activation,
                                     fixed_slope_relu_activation, arctan_activation, tanh_activation,
                                     arcsinh_activation, selu_activation, max_minus_one_activation,
                                     binary_step_activation, bent_identity_activation
"""

from activation_viewer.activations.basic_activations import (
    logistic_steep_activation,
    logistic_sigmoid_activation,
    soft_sign_activation,
    arctan_activation,
    tanh_activation,
    arcsinh_activation,
    selu_activation,
    bent_identity_activation,
)
from activation_viewer.activations.approximant_activations import (
    fast_exp,
    logistic_approximant_steep_activation,
    polynomial_approximant_activation,
    quadratic_sigmoid_activation,
)
from activation_viewer.activations.piecewise_activations import (
    relu_activation,
    leaky_relu_activation,
    leaky_relu_shifted_activation,
    srelu_activation,
    srelu_shifted_activation,
    parametric_relu_activation,
    fixed_slope_relu_activation,
    max_minus_one_activation,
    binary_step_activation,
)
from activation_viewer.activations.catalogue import (
    activations,
    parametric_activations,
    activation_identifiers,
    label_from_identifier,
    activation_label,
    get_activation,
)

__all__ = [
    'activations',
    'parametric_activations',
    'activation_identifiers',
    'label_from_identifier',
    'activation_label',
    'get_activation',
    'fast_exp',
    'logistic_steep_activation',
    'logistic_approximant_steep_activation',
    'logistic_sigmoid_activation',
    'soft_sign_activation',
    'polynomial_approximant_activation',
    'quadratic_sigmoid_activation',
    'relu_activation',
    'leaky_relu_activation',
    'leaky_relu_shifted_activation',
    'srelu_activation',
    'srelu_shifted_activation',
    'parametric_relu_activation',
    'fixed_slope_relu_activation',
    'arctan_activation',
    'tanh_activation',
    'arcsinh_activation',
    'selu_activation',
    'max_minus_one_activation',
    'binary_step_activation',
    'bent_identity_activation'
]
