"""Test configuration for Shufflax."""

import os
import sys

import pytest

# Add the src directory to the Python path so tests can import modules
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from shufflax.sources import PythonIndexSource, ScriptedIndexSource


# Register custom markers
def pytest_configure(config):
    """Register custom markers for pytest."""
    config.addinivalue_line("markers", "slow: mark test as a long-running statistical test")


# Add command-line options for different test types
def pytest_addoption(parser):
    """Add command-line options to pytest."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow statistical tests (one-million-trial runs)",
    )


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless explicitly requested."""
    if config.getoption("--run-slow"):
        return

    skip_slow = pytest.mark.skip(reason="slow test not selected (use --run-slow)")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def _clear_shufflax_env(monkeypatch):
    """Keep SHUFFLAX_* variables from the developer's shell out of tests."""
    for name in list(os.environ):
        if name.startswith("SHUFFLAX_"):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def random_seed() -> int:
    """Return a fixed random seed for reproducible tests."""
    return 42


@pytest.fixture
def seeded_source(random_seed) -> PythonIndexSource:
    """Return a seeded Python index source."""
    return PythonIndexSource(seed=random_seed)


@pytest.fixture
def abcd_script() -> ScriptedIndexSource:
    """Scripted draws j=1 at i=3, j=0 at i=2, j=1 at i=1."""
    return ScriptedIndexSource([1, 0, 1])
