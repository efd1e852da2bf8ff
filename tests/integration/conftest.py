"""
Shared fixtures for integration tests.
"""

import pytest
from pathlib import Path

from activation_viewer.run.config import Config


@pytest.fixture
def example_config_dir():
    """Directory holding the example configuration files."""
    return Path(__file__).parent.parent.parent / 'examples' / 'configs'


@pytest.fixture
def reference_config():
    """Reference sampling setup: 2000 points on [-2, 2], every activation, serial."""
    return Config()
