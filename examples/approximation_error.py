"""
Approximation Error of the Steep Logistic Approximants

The steep logistic 1/(1 + e^(-4.9x)) has two cheaper stand-ins in the catalogue:

    logistic_approximant_steep : the exact formula with e^x replaced by the
                                 IEEE-754 bit-trick 'fast_exp'
    polynomial_approximant     : a rational polynomial, no exponential at all

This example samples all three on the reference grid and reports how far each
approximant strays from the exact curve, and where.

Usage:
    python examples/approximation_error.py
"""

import numpy as np

from activation_viewer import Config, Sampler

APPROXIMANTS = ['logistic_approximant_steep', 'polynomial_approximant']


def main():
    config = Config()   # 2000 points on [-2, 2]
    exact, *approximations = Sampler(config).sample_all(['logistic_steep'] + APPROXIMANTS)

    s  = f"\nDeviation from '{exact.label}' on [{config.xmin}, {config.xmax}), {config.resolution} points:\n"
    for curve in approximations:
        error = np.abs(curve.y - exact.y)
        worst = int(np.argmax(error))
        s += f"  {curve.label:<28} max = {error[worst]:.6f} at x = {curve.x[worst]:+.3f}, "
        s += f"mean = {np.mean(error):.6f}\n"
    print(s)


if __name__ == '__main__':
    main()
