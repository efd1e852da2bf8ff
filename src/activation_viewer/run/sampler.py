"""
Activation Sampler Module

This module evaluates catalogue activation functions over a dense linear grid
and packages the results as labelled curves, ready to be handed to a plotting
front end. Sampling of several functions can run serially or in parallel
using joblib, since every function is pure and every curve is independent.
"""

import warnings
from typing import NamedTuple

import numpy as np
from joblib import Parallel, delayed

from activation_viewer.activations import (
    activation_label,
    get_activation,
    parametric_activations,
)
from activation_viewer.run.config import Config

def linear_grid(xmin: float, xmax: float, resolution: int) -> np.ndarray:
    """
    Build the sample positions x_i = xmin + i * (xmax - xmin) / resolution.

    The grid holds 'resolution' points; 'xmax' itself is not included.

    Raises:
        ValueError: if resolution < 1 or xmax <= xmin
    """
    if resolution < 1:
        raise ValueError(f"resolution must be at least 1, got {resolution}")
    if not xmax > xmin:
        raise ValueError(f"xmax ({xmax}) must be greater than xmin ({xmin})")

    incr = (xmax - xmin) / resolution
    return xmin + np.arange(resolution, dtype=np.float64) * incr

class Curve(NamedTuple):
    """The sampled values of one activation function."""
    name : str
    label: str
    x    : np.ndarray
    y    : np.ndarray

class Sampler:
    """
    Samples activation functions over the interval described by a Config.

    Public Methods:
        grid():                       the sample positions
        sample(name):                 sample one activation function
        sample_all(names, num_jobs):  sample several activation functions
    """

    def __init__(self, config: Config):
        """
        Parameters:
            config: sampling interval, resolution, activation selection
                    and the slope used for the parametric ReLU
        """
        self._config: Config = config

    def grid(self) -> np.ndarray:
        return linear_grid(self._config.xmin, self._config.xmax, self._config.resolution)

    def sample(self, name: str) -> Curve:
        """
        Evaluate the activation function registered under 'name' on the grid.

        Parametric functions receive 'config.parametric_relu_slope' as their
        shape parameter. Curves containing non-finite values are returned
        unchanged, with a warning.

        Raises:
            KeyError: if 'name' is not a registered activation function
        """
        fn = get_activation(name)
        x  = self.grid()

        if name in parametric_activations:
            y = fn(x, self._config.parametric_relu_slope)
        else:
            y = fn(x)
        y = np.asarray(y, dtype=np.float64)

        num_bad = int(np.count_nonzero(~np.isfinite(y)))
        if num_bad:
            warnings.warn(f"{activation_label(name)}: {num_bad} of {y.size} samples are not finite")

        return Curve(name, activation_label(name), x, y)

    def sample_all(self, names: list[str] | None = None, num_jobs: int | None = None) -> list[Curve]:
        """
        Sample several activation functions.

        Parameters:
            names:    activation names, in the order the curves are returned.
                      Defaults to 'config.activation_options'.
            num_jobs: Number of parallel processes
                       1 = serial
                      -1 = use all available CPU cores
                      >1 = use specified number of processes
                      Defaults to 'config.num_jobs'.
        """
        if names is None:
            names = self._config.activation_options
        if num_jobs is None:
            num_jobs = self._config.num_jobs

        serialize = num_jobs == 1

        if serialize:
            curves = [self.sample(name) for name in names]
        else:
            curves = Parallel(num_jobs)(delayed(self.sample)(name) for name in names)

        return list(curves)
