"""
zktree

Incremental Merkle commitment tree over BN254 field elements.
"""
from .merkle import DEFAULT_ZERO, IncrementalMerkleTree, MerklePath
from .crypto import (
    FIELD_MODULUS,
    MimcSpongeHasher,
    Sha256FieldHasher,
    TwoToOneHasher,
    field_from_str,
)
from .schemas import (
    CapacityExceededException,
    IndexOutOfBoundsException,
    InvalidArgumentException,
    TreeFullException,
    ZkTreeException,
)

__version__ = "0.1.0"

__all__ = [
    "IncrementalMerkleTree",
    "MerklePath",
    "DEFAULT_ZERO",
    "FIELD_MODULUS",
    "TwoToOneHasher",
    "MimcSpongeHasher",
    "Sha256FieldHasher",
    "field_from_str",
    "ZkTreeException",
    "CapacityExceededException",
    "TreeFullException",
    "IndexOutOfBoundsException",
    "InvalidArgumentException",
]
