"""
Pytest configuration and shared fixtures for zktree tests.

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

# Get the project root (parent of tests/)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_TESTS_ROOT = Path(__file__).resolve().parent

# Add both project root and tests root to sys.path
for _path in [str(_PROJECT_ROOT), str(_TESTS_ROOT)]:
    if _path not in sys.path:
        sys.path.insert(0, _path)

from zktree.crypto.hashing import Sha256FieldHasher  # noqa: E402
from zktree.merkle.merkle_tree import IncrementalMerkleTree  # noqa: E402


# =============================================================================
# Pytest Fixtures (autodiscovered by pytest)
# =============================================================================

@pytest.fixture
def sha_hasher():
    """Fast non-circuit hasher for structural tests."""
    return Sha256FieldHasher()


@pytest.fixture
def small_tree(sha_hasher):
    """Depth-3 tree with five leaves."""
    return IncrementalMerkleTree(3, hasher=sha_hasher, elements=[11, 22, 33, 44, 55])


@pytest.fixture
def empty_tree(sha_hasher):
    """Empty depth-4 tree."""
    return IncrementalMerkleTree(4, hasher=sha_hasher)


# =============================================================================
# Pytest Configuration
# =============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )
