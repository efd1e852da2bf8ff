"""
Activation Viewer - scalar activation functions and their curves.

This package provides a fixed catalogue of activation functions used in neural
networks, together with the tooling needed to sample them for plotting.

Main components:
- activations: the activation functions (exact, approximant and piecewise) and their catalogue
- run: sampling configuration, grid sampler and command-line front end

Example:
    >>> from activation_viewer import Config, Sampler
    >>> config = Config()                    # 2000 points on [-2, 2]
    >>> curve = Sampler(config).sample("relu")
    >>> curve.label
    'ReLU'
"""

__version__ = "0.1.0"

# Import main classes for convenient access
from activation_viewer.activations import (
    activations,
    parametric_activations,
    activation_label,
    get_activation,
)
from activation_viewer.run.config import Config
from activation_viewer.run.sampler import Curve, Sampler, linear_grid

__all__ = [
    "activations",
    "parametric_activations",
    "activation_label",
    "get_activation",
    "Config",
    "Curve",
    "Sampler",
    "linear_grid",
]
