"""
Activation Viewer Run Package

This package turns the activation catalogue into sampled curves: it reads the
sampling configuration, evaluates the selected functions over a linear grid,
and reports or exports the results.

Modules:
    config:  Configuration management for the sampling parameters
    sampler: Linear grid, Curve record and Sampler (serial or joblib-parallel)
    cli:     Command-line front end

Exported Classes:
    Config:  Configuration parameters for sampling
    Curve:   Sampled values of one activation function
    Sampler: Evaluates activation functions over the configured grid
"""

from activation_viewer.run.config  import Config
from activation_viewer.run.sampler import Curve, Sampler, linear_grid

__all__ = ['Config', 'Curve', 'Sampler', 'linear_grid']
