"""
Pytest configuration and shared fixtures for the polymaze test suite.
"""

import pytest

import numpy as np

from polymaze.mazes import MazeContext

# =============================================================================
# Test Configuration
# =============================================================================


def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "slow: Slow tests (deep mazes)")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test paths."""
    for item in items:
        test_path = str(item.fspath)

        if "/unit/" in test_path:
            item.add_marker(pytest.mark.unit)

        if "deep" in item.name or "slow" in item.name:
            item.add_marker(pytest.mark.slow)


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def rng():
    """Seeded random source."""
    return np.random.default_rng(42)


@pytest.fixture
def context():
    """Fresh drawing context at the origin with the pen up."""
    return MazeContext.create(seed=42)


@pytest.fixture
def traced_context():
    """Drawing context that records every tiling decision."""
    return MazeContext.create(seed=42, record_tilings=True)
