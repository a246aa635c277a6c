"""Pytest configuration and shared fixtures."""

import pytest
import sys
import numpy as np
from pathlib import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture
def rng():
    """A seeded random generator, for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def and_samples():
    """Truth table of the logical AND."""
    inputs  = [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]
    outputs = [[0.0], [0.0], [0.0], [1.0]]
    return inputs, outputs


@pytest.fixture
def xor_samples():
    """Truth table of the logical XOR."""
    inputs  = [[0.0, 0.0], [0.0, 1.0], [1.0, 0.0], [1.0, 1.0]]
    outputs = [[0.0], [1.0], [1.0], [0.0]]
    return inputs, outputs
