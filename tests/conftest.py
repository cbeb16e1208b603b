"""
Pytest configuration and shared fixtures for hashtree tests.

This conftest.py:
1. Adds project root to sys.path for imports
2. Provides commonly-used fixtures via pytest's autodiscovery
3. Configures pytest markers and settings
"""

import sys
from pathlib import Path

import pytest

# =============================================================================
# Path Setup - Must happen before any local imports
# =============================================================================

_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

# =============================================================================
# Import fixtures using importlib (more robust for pytest loading)
# =============================================================================

import importlib

_common = importlib.import_module("fixtures.common")

make_items = _common.make_items
make_lorem_items = _common.make_lorem_items
make_data_dir = _common.make_data_dir

from hashtree.crypto.hashing import Djb2Hasher, SdbmHasher, Sha256Hasher


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def sha256_hasher():
    """Provide the default SHA-256 hasher."""
    return Sha256Hasher()


@pytest.fixture(params=["sha256", "djb2", "sdbm"])
def any_hasher(request):
    """Run a test once per registered hasher."""
    return {
        "sha256": Sha256Hasher,
        "djb2": Djb2Hasher,
        "sdbm": SdbmHasher,
    }[request.param]()


@pytest.fixture
def lorem_items():
    """Provide the lorem ipsum word list."""
    return make_lorem_items()


@pytest.fixture
def data_dir(tmp_path):
    """Provide a directory of sample files for the file server."""
    return make_data_dir(tmp_path / "data")


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    """Keep HASHTREE_* variables from the host out of tests."""
    for key in [
        "HASHTREE_HASHER",
        "HASHTREE_CHUNK_SIZE",
        "HASHTREE_EXTENSIONS",
        "HASHTREE_LOG_LEVEL",
        "HASHTREE_LOG_FILE",
    ]:
        monkeypatch.delenv(key, raising=False)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
