"""
Crypto - Two-to-One Hashers
Pluggable node hash for the commitment tree.

This module provides:
- TwoToOneHasher: protocol every node hash implements
- MimcSpongeHasher: default, circuit-friendly MiMC sponge adapter
- Sha256FieldHasher: SHA-256 of two 32-byte words reduced into the field
- CallableHasher: adapter for plain (left, right) -> int functions
- as_hasher / get_hasher: normalize or look up a hasher

Determinism Notes:
- A hasher must be pure: same inputs always give the same output
- Outputs are always reduced field elements
"""
from __future__ import annotations

import hashlib
from typing import Callable, Protocol, runtime_checkable

from zktree.crypto.field import FIELD_BYTES, FIELD_MODULUS, field_zero, to_field
from zktree.crypto.mimc import MimcSponge
from zktree.schemas.errors import InvalidArgumentException


@runtime_checkable
class TwoToOneHasher(Protocol):
    """Combines a left and a right child into their parent node."""

    def hash(self, left: int, right: int) -> int:
        ...


class MimcSpongeHasher:
    """
    MiMC sponge over [left, right] with key zero and a single output.

    Matches circomlib's `MiMCSponge(2, 220, 1)` with k = 0, the hash
    tornado-style Merkle circuits use for `HashLeftRight`.
    """

    name = "mimc"

    def __init__(self, sponge: MimcSponge | None = None) -> None:
        self.sponge = sponge or MimcSponge()
        self.key = field_zero()

    def hash(self, left: int, right: int) -> int:
        return self.sponge.multi_hash([left, right], self.key, 1)[0]

    def __repr__(self) -> str:
        return f"MimcSpongeHasher(rounds={self.sponge.rounds})"


class Sha256FieldHasher:
    """SHA-256 over two big-endian 32-byte words, reduced mod p. Not circuit friendly."""

    name = "sha256"

    def hash(self, left: int, right: int) -> int:
        h = hashlib.sha256()
        h.update(to_field(left).to_bytes(FIELD_BYTES, "big"))
        h.update(to_field(right).to_bytes(FIELD_BYTES, "big"))
        return int.from_bytes(h.digest(), "big") % FIELD_MODULUS

    def __repr__(self) -> str:
        return "Sha256FieldHasher()"


class CallableHasher:
    """Wraps a plain function so it satisfies TwoToOneHasher."""

    def __init__(self, fn: Callable[[int, int], int]) -> None:
        self.fn = fn

    def hash(self, left: int, right: int) -> int:
        return to_field(self.fn(left, right))

    def __repr__(self) -> str:
        return f"CallableHasher({getattr(self.fn, '__name__', self.fn)!r})"


_HASHERS: dict[str, Callable[[], TwoToOneHasher]] = {
    MimcSpongeHasher.name: MimcSpongeHasher,
    Sha256FieldHasher.name: Sha256FieldHasher,
}


def get_hasher(name: str) -> TwoToOneHasher:
    """
    Look up a built-in hasher by name.

    Args:
        name: "mimc" or "sha256" (case-insensitive)

    Raises:
        InvalidArgumentException: If the name is unknown
    """
    factory = _HASHERS.get(name.strip().lower())
    if factory is None:
        raise InvalidArgumentException(
            f"Unknown hasher '{name}'. Available: {sorted(_HASHERS)}",
            argument="hasher",
        )
    return factory()


def as_hasher(obj: TwoToOneHasher | Callable[[int, int], int] | str | None) -> TwoToOneHasher:
    """
    Normalize a hasher argument.

    None selects the default MiMC sponge, a string is looked up with
    get_hasher, a TwoToOneHasher is returned as-is and any other callable
    is wrapped in CallableHasher.
    """
    if obj is None:
        return MimcSpongeHasher()
    if isinstance(obj, str):
        return get_hasher(obj)
    if isinstance(obj, type):
        raise InvalidArgumentException(
            f"Hasher must be an instance, got the class {obj.__name__}",
            argument="hasher",
        )
    if isinstance(obj, TwoToOneHasher):
        return obj
    if callable(obj):
        return CallableHasher(obj)
    raise InvalidArgumentException(
        f"Hasher must implement hash(left, right) or be callable, got {type(obj).__name__}",
        argument="hasher",
    )


__all__ = [
    "TwoToOneHasher",
    "MimcSpongeHasher",
    "Sha256FieldHasher",
    "CallableHasher",
    "get_hasher",
    "as_hasher",
]
