"""
Merkle - Authentication Paths
Sibling/direction data extracted from an IncrementalMerkleTree.

A path lists, bottom-up, one sibling and one direction bit per level:
- path_elements[i]: the sibling of the current node at level i
- path_indices[i]: 0 if the current node is the left child, 1 if right

Recombining from the leaf:
    node = leaf
    for sibling, bit in zip(path_elements, path_indices):
        node = hash(node, sibling) if bit == 0 else hash(sibling, node)
    node == root

The pathElements/pathIndices naming in to_dict() follows the input
signals of circom Merkle membership circuits.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class MerklePath:
    """
    Authentication path for a single leaf.

    Attributes:
        leaf: The leaf value at `index`
        index: 0-based leaf index
        path_elements: Sibling values from leaf level to just below the root
        path_indices: Direction bits, one per level
        root: Tree root at the time the path was extracted
    """
    leaf: int
    index: int
    path_elements: tuple[int, ...]
    path_indices: tuple[int, ...]
    root: int

    def __post_init__(self) -> None:
        """Validate path structure."""
        if self.index < 0:
            raise ValueError(f"Leaf index must be non-negative, got {self.index}")
        if len(self.path_elements) != len(self.path_indices):
            raise ValueError(
                f"Path has {len(self.path_elements)} elements but "
                f"{len(self.path_indices)} direction bits"
            )
        if any(bit not in (0, 1) for bit in self.path_indices):
            raise ValueError(f"Direction bits must be 0 or 1, got {list(self.path_indices)}")

    @property
    def depth(self) -> int:
        return len(self.path_elements)

    def to_dict(self) -> dict[str, Any]:
        """Render as circuit input signals (field elements as decimal strings)."""
        return {
            "leaf": str(self.leaf),
            "root": str(self.root),
            "pathElements": [str(e) for e in self.path_elements],
            "pathIndices": list(self.path_indices),
        }


__all__ = ["MerklePath"]
