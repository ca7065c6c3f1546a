"""Pytest configuration and fixtures for samplekit tests.

The samplekit plugin itself (fixture_generator, test_dir, samplekit_seed)
is enabled from the top-level conftest.py.
"""

import pytest

from samplekit.generate.values import FixtureGenerator

# Fixed seed so generator-driven tests see the same values on every run
RANDOM_SEED = 42


@pytest.fixture
def gen():
    """A FixtureGenerator with the fixed test seed."""
    return FixtureGenerator(seed=RANDOM_SEED)
