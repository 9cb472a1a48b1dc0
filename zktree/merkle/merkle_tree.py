"""
Merkle - Incremental Merkle Tree
Fixed-depth binary Merkle tree over field elements with append/update support.

This module provides:
- DEFAULT_ZERO: canonical zero leaf used when none is supplied
- IncrementalMerkleTree: the tree itself

Canonical Commitment Rules:
1. zeros[0] = zero leaf; zeros[i] = hash(zeros[i-1], zeros[i-1])
2. Parent hashing: layers[i][j] = hash(layers[i-1][2j], layers[i-1][2j+1])
3. Padding: a missing right child at level i-1 is replaced by zeros[i-1]
4. Empty tree: root = zeros[levels]
5. Leaves keep insertion order and are never removed, only overwritten

Concurrency Notes:
- Not thread-safe; callers serialize access to a shared tree
"""
from __future__ import annotations

import logging
from typing import Callable, Iterable, Optional

from zktree.crypto.field import field_from_str, to_field
from zktree.crypto.hashing import TwoToOneHasher, as_hasher
from zktree.merkle.merkle_path import MerklePath
from zktree.schemas.errors import (
    CapacityExceededException,
    IndexOutOfBoundsException,
    InvalidArgumentException,
    TreeFullException,
)

logger = logging.getLogger(__name__)


# keccak256("tornado") mod p
DEFAULT_ZERO: str = "21663839004416932945382355908790599225266501822907911457504978515578255421292"


class IncrementalMerkleTree:
    """
    Fixed-depth Merkle tree with O(levels) insert and update.

    Layer 0 holds the leaves, layer `levels` holds the root. Internal
    layers only store nodes that have at least one real leaf below them;
    everything else is implied by the zeros table.

    Example:
        >>> tree = IncrementalMerkleTree(4, hasher="sha256")
        >>> tree.insert(42)
        >>> tree.path(0).path_indices
        (0, 0, 0, 0)
    """

    def __init__(
        self,
        levels: int,
        zero_element: Optional[str] = None,
        hasher: TwoToOneHasher | Callable[[int, int], int] | str | None = None,
        elements: Optional[Iterable[int]] = None,
    ) -> None:
        """
        Args:
            levels: Tree depth, at least 1. Capacity is 2 ** levels.
            zero_element: Decimal string of the empty-leaf value
                (defaults to DEFAULT_ZERO)
            hasher: Node hash; defaults to the MiMC sponge
            elements: Optional initial leaves

        Raises:
            InvalidArgumentException: Bad depth, zero element or hasher
            CapacityExceededException: More initial leaves than capacity
        """
        if isinstance(levels, bool) or not isinstance(levels, int) or levels < 1:
            raise InvalidArgumentException(
                f"Tree depth must be a positive int, got {levels!r}",
                argument="levels",
            )

        self.levels = levels
        self.capacity = 2 ** levels
        self.zero_element = DEFAULT_ZERO if zero_element is None else zero_element
        zero = field_from_str(self.zero_element)
        self.hasher = as_hasher(hasher)

        leaves = [] if elements is None else [to_field(e) for e in elements]
        if len(leaves) > self.capacity:
            raise CapacityExceededException(
                f"Tree of depth {levels} holds at most {self.capacity} leaves, "
                f"got {len(leaves)}",
                capacity=self.capacity,
                requested=len(leaves),
            )

        self._zeros: list[int] = [zero]
        for level in range(1, levels + 1):
            self._zeros.append(self._hash(self._zeros[level - 1], self._zeros[level - 1]))

        self._layers: list[list[int]] = [leaves] + [[] for _ in range(levels)]
        self._rebuild()

        logger.info(
            f"Created merkle tree: levels={levels} capacity={self.capacity} "
            f"leaves={len(leaves)} hasher={self.hasher!r}"
        )

    # -------------------------------------------------------------------------
    # Read operations
    # -------------------------------------------------------------------------

    def root(self) -> int:
        """Current root; zeros[levels] while the tree is empty."""
        top = self._layers[self.levels]
        if not top:
            return self._zeros[self.levels]
        return top[0]

    def path(self, index: int) -> MerklePath:
        """
        Build the authentication path for the leaf at `index`.

        Raises:
            IndexOutOfBoundsException: If index is not a current leaf
        """
        self._check_index(index)

        path_elements: list[int] = []
        path_indices: list[int] = []
        current = index
        for level in range(self.levels):
            path_indices.append(current % 2)
            sibling = current ^ 1
            layer = self._layers[level]
            if sibling < len(layer):
                path_elements.append(layer[sibling])
            else:
                path_elements.append(self._zeros[level])
            current >>= 1

        return MerklePath(
            leaf=self._layers[0][index],
            index=index,
            path_elements=tuple(path_elements),
            path_indices=tuple(path_indices),
            root=self.root(),
        )

    def elements(self) -> list[int]:
        """Copy of the leaves in insertion order."""
        return list(self._layers[0])

    def index_of(self, element: int) -> int:
        """First index holding `element`, or -1 if it is not a leaf."""
        target = to_field(element)
        for i, leaf in enumerate(self._layers[0]):
            if leaf == target:
                return i
        return -1

    @property
    def leaf_count(self) -> int:
        return len(self._layers[0])

    @property
    def zeros(self) -> tuple[int, ...]:
        """Empty-subtree value per level, zeros[0] being the zero leaf."""
        return tuple(self._zeros)

    @property
    def layers(self) -> list[list[int]]:
        """Copy of every layer, leaves first."""
        return [list(layer) for layer in self._layers]

    def __len__(self) -> int:
        return len(self._layers[0])

    def __repr__(self) -> str:
        return (
            f"IncrementalMerkleTree(levels={self.levels}, "
            f"leaves={len(self._layers[0])}/{self.capacity})"
        )

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def update(self, index: int, element: int) -> None:
        """
        Overwrite the leaf at `index` and recompute its ancestors.

        Raises:
            IndexOutOfBoundsException: If index is not a current leaf
        """
        self._check_index(index)
        value = to_field(element)

        self._layers[0][index] = value
        self._propagate(index)

    def insert(self, element: int) -> None:
        """
        Append a leaf.

        Raises:
            TreeFullException: If the tree already holds `capacity` leaves
        """
        count = len(self._layers[0])
        if count >= self.capacity:
            raise TreeFullException(
                f"Tree is full ({self.capacity} leaves)",
                capacity=self.capacity,
                leaf_count=count,
            )
        value = to_field(element)

        self._layers[0].append(self._zeros[0])
        self.update(count, value)

    def bulk_insert(self, elements: Iterable[int]) -> None:
        """
        Append several leaves.

        All but the last leaf only propagate upward through completed
        pairs; the last one goes through insert() which settles the
        zero-padded right edge. Only valid for sequential appends.
        A batch may fill the tree exactly up to capacity.

        Raises:
            InvalidArgumentException: If elements is empty
            TreeFullException: If the leaves do not fit
        """
        values = [to_field(e) for e in elements]
        if not values:
            raise InvalidArgumentException(
                "bulk_insert requires at least one element",
                argument="elements",
            )
        count = len(self._layers[0])
        if count + len(values) > self.capacity:
            raise TreeFullException(
                f"Cannot insert {len(values)} leaves: tree holds {count} "
                f"of {self.capacity}",
                capacity=self.capacity,
                leaf_count=count,
                details={"requested": len(values)},
            )

        leaves = self._layers[0]
        for value in values[:-1]:
            leaves.append(value)
            level = 0
            index = len(leaves) - 1
            while index % 2 == 1:
                level += 1
                index >>= 1
                below = self._layers[level - 1]
                self._set_node(level, index, self._hash(below[2 * index], below[2 * index + 1]))

        self.insert(values[-1])
        logger.debug(f"Bulk inserted {len(values)} leaves, now {len(leaves)}")

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _hash(self, left: int, right: int) -> int:
        return self.hasher.hash(left, right)

    def _check_index(self, index: int) -> None:
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidArgumentException(
                f"Leaf index must be an int, got {type(index).__name__}",
                argument="index",
            )
        count = len(self._layers[0])
        if index < 0 or index >= count or index >= self.capacity:
            raise IndexOutOfBoundsException(
                f"Leaf index {index} out of range for {count} leaves",
                index=index,
                leaf_count=count,
            )

    def _pair_hash(self, level: int, index: int) -> int:
        """Hash of node `index`'s children, which live at `level - 1`."""
        below = self._layers[level - 1]
        left = below[2 * index]
        if 2 * index + 1 < len(below):
            right = below[2 * index + 1]
        else:
            right = self._zeros[level - 1]
        return self._hash(left, right)

    def _set_node(self, level: int, index: int, value: int) -> None:
        layer = self._layers[level]
        if index == len(layer):
            layer.append(value)
        else:
            layer[index] = value

    def _propagate(self, index: int) -> None:
        for level in range(1, self.levels + 1):
            index >>= 1
            self._set_node(level, index, self._pair_hash(level, index))

    def _rebuild(self) -> None:
        for level in range(1, self.levels + 1):
            layer = self._layers[level]
            layer.clear()
            pairs = (len(self._layers[level - 1]) + 1) // 2
            logger.debug(f"Rebuilding level {level}: {pairs} nodes")
            for index in range(pairs):
                layer.append(self._pair_hash(level, index))


__all__ = [
    "DEFAULT_ZERO",
    "IncrementalMerkleTree",
]
