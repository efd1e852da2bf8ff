"""
Activation Catalogue Module.

The closed set of activation functions known to the viewer. Every function is
registered under a snake_case key, and carries a CamelCase identifier from
which its display label is derived.

Exported:
    activations:            unary functions, f(z)
    parametric_activations: functions taking a shape parameter, f(z, a)
    activation_identifiers: CamelCase identifier of every registered function
    label_from_identifier:  turns an identifier into a display label
    activation_label:       display label of a registered function
    get_activation:         lookup across both registries
"""

import re

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

# Insertion order is the display order
activations = {
    "logistic_approximant_steep": logistic_approximant_steep_activation,
    "logistic_steep"            : logistic_steep_activation,
    "polynomial_approximant"    : polynomial_approximant_activation,
    "quadratic_sigmoid"         : quadratic_sigmoid_activation,
    "soft_sign"                 : soft_sign_activation,
    "relu"                      : relu_activation,
    "leaky_relu"                : leaky_relu_activation,
    "leaky_relu_shifted"        : leaky_relu_shifted_activation,
    "srelu"                     : srelu_activation,
    "srelu_shifted"             : srelu_shifted_activation,
    "fixed_slope_relu"          : fixed_slope_relu_activation,
    "arctan"                    : arctan_activation,
    "tanh"                      : tanh_activation,
    "arcsinh"                   : arcsinh_activation,
    "selu"                      : selu_activation,
    "max_minus_one"             : max_minus_one_activation,
    "logistic_sigmoid"          : logistic_sigmoid_activation,
    "binary_step"               : binary_step_activation,
    "bent_identity"             : bent_identity_activation
    }

parametric_activations = {
    "parametric_relu": parametric_relu_activation
    }

activation_identifiers = {
    "logistic_approximant_steep": "LogisticApproximantSteep",
    "logistic_steep"            : "LogisticFunctionSteep",
    "polynomial_approximant"    : "PolynomialApproximant",
    "quadratic_sigmoid"         : "QuadraticSigmoid",
    "soft_sign"                 : "SoftSign",
    "relu"                      : "ReLU",
    "leaky_relu"                : "LeakyReLU",
    "leaky_relu_shifted"        : "LeakyReLUShifted",
    "srelu"                     : "S-ShapedReLU",
    "srelu_shifted"             : "S-ShapedReLUShifted",
    "fixed_slope_relu"          : "FixedSlopeReLU",
    "arctan"                    : "ArcTan",
    "tanh"                      : "TanH",
    "arcsinh"                   : "ArcSinH",
    "selu"                      : "ScaledExponentialLinearUnit",
    "max_minus_one"             : "MaxMinusOne",
    "logistic_sigmoid"          : "LogisticSigmoid",
    "binary_step"               : "BinaryStep",
    "bent_identity"             : "BentIdentity",
    "parametric_relu"           : "ParametricReLU"
    }

# A capital letter starts a new word unless it is the first character, or is
# followed by another capital or the end of the string (keeps "ReLU", "TanH").
_WORD_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z](?![A-Z]|$))")

def label_from_identifier(identifier: str) -> str:
    """
    Convert a CamelCase identifier into a space separated label.

    Example:
        >>> label_from_identifier("LeakyReLUShifted")
        'Leaky ReLU Shifted'
    """
    return " ".join(_WORD_BOUNDARY.split(identifier))

def activation_label(name: str) -> str:
    """Display label of the activation registered under 'name'."""
    return label_from_identifier(activation_identifiers[name])

def get_activation(name: str):
    """
    Look up an activation function by key.

    Unary functions are searched first, then parametric ones.

    Raises:
        KeyError: if no function is registered under 'name'
    """
    if name in activations:
        return activations[name]
    if name in parametric_activations:
        return parametric_activations[name]
    valid = ", ".join(list(activations) + list(parametric_activations))
    raise KeyError(f"Unknown activation function '{name}'. Valid names: {valid}")
