"""
Test fixtures for zktree tests.

Import helpers directly:
    from fixtures import reference_root, recombine
"""

from .merkle_fixtures import (
    make_leaves,
    recombine,
    reference_root,
)

__all__ = [
    "make_leaves",
    "recombine",
    "reference_root",
]
