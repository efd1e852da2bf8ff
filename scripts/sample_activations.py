#!/usr/bin/env python3
"""
Utility script to sample the activation functions.

Usage:
    python scripts/sample_activations.py
    python scripts/sample_activations.py --list
    python scripts/sample_activations.py --config examples/configs/config_sigmoids.ini --output sigmoids.csv
"""

import sys
from pathlib import Path

# Add the source directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from activation_viewer.run.cli import main


if __name__ == '__main__':
    sys.exit(main())
