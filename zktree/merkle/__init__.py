"""
Merkle Tree and Commitments
Incremental fixed-depth Merkle tree over field elements + path extraction.

This module provides:
- IncrementalMerkleTree: append/update-capable commitment tree
- MerklePath: sibling/direction data for one leaf
- DEFAULT_ZERO: canonical empty-leaf value

Usage:
    from zktree.merkle import IncrementalMerkleTree

    tree = IncrementalMerkleTree(20)
    tree.insert(commitment)
    path = tree.path(0)
    circuit_inputs = path.to_dict()
"""
from .merkle_path import MerklePath
from .merkle_tree import (
    DEFAULT_ZERO,
    IncrementalMerkleTree,
)


__all__ = [
    "MerklePath",
    "DEFAULT_ZERO",
    "IncrementalMerkleTree",
]
