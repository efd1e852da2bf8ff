"""
Command-line front end for sampling the activation catalogue.

Usage:
    activation-viewer
    activation-viewer --list
    activation-viewer --activations relu,selu --resolution 500
    activation-viewer --config examples/configs/config_reference.ini --output curves.csv
"""

import argparse

import numpy as np

from activation_viewer.activations import (
    activations,
    parametric_activations,
    activation_label,
)
from activation_viewer.run.config import Config
from activation_viewer.run.sampler import Curve, Sampler

def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Sample activation functions over a linear grid')
    parser.add_argument('--config', default=None,
                        help='INI configuration file (defaults: 2000 points on [-2, 2])')
    parser.add_argument('--xmin', type=float, default=None,
                        help='Start of the sampling interval')
    parser.add_argument('--xmax', type=float, default=None,
                        help='End of the sampling interval (excluded)')
    parser.add_argument('--resolution', type=int, default=None,
                        help='Number of samples')
    parser.add_argument('--activations', default=None,
                        help='"all", "unary" or a comma-separated list of activation names')
    parser.add_argument('--num-jobs', type=int, default=None,
                        help='Number of parallel jobs')
    parser.add_argument('--output', default=None,
                        help='Write the sampled curves to this CSV file')
    parser.add_argument('--list', action='store_true',
                        help='List the available activation functions and exit')
    return parser

def _apply_overrides(config: Config, args: argparse.Namespace):
    if args.xmin is not None:
        config.xmin = args.xmin
    if args.xmax is not None:
        config.xmax = args.xmax
    if args.resolution is not None:
        config.resolution = args.resolution
    if args.activations is not None:
        config.activation_options = args.activations
    if args.num_jobs is not None:
        config.num_jobs = args.num_jobs

def print_catalogue():
    for name in list(activations) + list(parametric_activations):
        print(f"{name:<28} {activation_label(name)}")

def print_report(curves: list[Curve]):
    """One line per curve: range of values and the value closest to x = 0."""
    print("=" * 60)
    print(f"{'ACTIVATION':<32}{'MIN':>9}{'MAX':>9}{'AT 0':>10}")
    print("=" * 60)
    for curve in curves:
        i0 = int(np.argmin(np.abs(curve.x)))
        print(f"{curve.label:<32}{np.nanmin(curve.y):>9.4f}{np.nanmax(curve.y):>9.4f}{curve.y[i0]:>10.4f}")
    print("=" * 60)

def write_csv(path: str, curves: list[Curve]):
    """Write one 'x' column followed by one column per curve."""
    x       = curves[0].x
    columns = [x] + [curve.y for curve in curves]
    header  = ",".join(["x"] + [curve.name for curve in curves])
    np.savetxt(path, np.column_stack(columns), fmt='%.17g', delimiter=',', header=header, comments='')

def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args   = parser.parse_args(argv)

    if args.list:
        print_catalogue()
        return 0

    try:
        config = Config(args.config)
        _apply_overrides(config, args)
        curves = Sampler(config).sample_all()
    except (FileNotFoundError, ValueError, KeyError) as e:
        parser.error(str(e))

    print(f"Sampled {len(curves)} activation functions, "
          f"{config.resolution} points on [{config.xmin}, {config.xmax})")
    print_report(curves)

    if args.output is not None:
        write_csv(args.output, curves)
        print(f"Curves written to {args.output}")

    return 0

if __name__ == '__main__':
    raise SystemExit(main())
