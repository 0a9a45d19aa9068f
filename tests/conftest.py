"""
Pytest configuration and fixtures for PyColorNoise test suite.

This file contains shared fixtures, test configuration, and utilities
used across the test suite.
"""
import os
import sys
import pytest
import numpy as np

# Headless plotting for spectrum tests
os.environ.setdefault("MPLBACKEND", "Agg")


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker in ("unit", "integration", "importtest", "slow"):
        config.addinivalue_line("markers", marker)


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers and ordering."""
    for item in items:
        # Mark import tests for easy selection
        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


class SequenceRandom:
    """
    Random source returning a fixed raster-order sequence.

    Stands in for numpy.random.Generator: ``random(size, dtype)`` hands back
    the stored values, cycling if more are requested than stored.
    """

    def __init__(self, values):
        self.values = np.asarray(values, dtype=np.float64).ravel()
        self.calls = 0

    def random(self, size, dtype=np.float64):
        self.calls += 1
        n = int(np.prod(size))
        reps = -(-n // self.values.size)
        return np.tile(self.values, reps)[:n].reshape(size).astype(dtype)


@pytest.fixture
def ramp_random():
    """Random source producing 0, 1/16, ..., 15/16 in raster order."""
    return SequenceRandom(np.arange(16) / 16.0)


@pytest.fixture
def fixed_random_factory():
    """Build fresh random sources replaying one fixed white noise field."""
    values = np.random.default_rng(1234).random(64 * 48)

    def factory():
        return SequenceRandom(values)

    return factory


@pytest.fixture
def rng():
    """Seeded numpy generator for statistical tests."""
    return np.random.default_rng(20240611)


class TestDataManager:
    """Helper class for managing test data."""

    @staticmethod
    def create_gradient(nx=8, ny=6):
        """Strictly increasing raster-order ramp."""
        return np.arange(nx * ny, dtype=np.float32).reshape(ny, nx)

    @staticmethod
    def create_with_ties(nx=10, ny=10, levels=4, seed=0):
        """Field with only a few distinct values."""
        gen = np.random.default_rng(seed)
        return gen.integers(0, levels, size=(ny, nx)).astype(np.float32)


@pytest.fixture
def test_data_manager():
    """Provide access to test data creation utilities."""
    return TestDataManager()
