"""Pytest configuration and shared fixtures."""

import pytest
import sys
from pathlib import Path

import numpy as np

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_dir))


@pytest.fixture
def sample_1d_array():
    """Standard 1D array for testing."""
    return np.array([-2.0, -1.0, 0.0, 1.0, 2.0])


@pytest.fixture
def sample_2d_array():
    """Standard 2D array for testing."""
    return np.array([[-1.0, 0.0, 1.0], [2.0, 3.0, 4.0]])


@pytest.fixture
def wide_grid():
    """Dense sample of [-1000, 1000] used for range checks."""
    return np.linspace(-1000.0, 1000.0, 20001)

