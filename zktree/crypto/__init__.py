"""
Core cryptographic utilities.

Field element helpers, the MiMC sponge and the pluggable node hashers.
"""
from .field import (
    FIELD_MODULUS,
    FIELD_BYTES,
    field_zero,
    field_from_str,
    to_field,
    field_to_hex,
)
from .mimc import (
    MIMC_SEED,
    MIMC_ROUNDS,
    round_constants,
    MimcSponge,
)
from .hashing import (
    TwoToOneHasher,
    MimcSpongeHasher,
    Sha256FieldHasher,
    CallableHasher,
    get_hasher,
    as_hasher,
)

__all__ = [
    "FIELD_MODULUS",
    "FIELD_BYTES",
    "field_zero",
    "field_from_str",
    "to_field",
    "field_to_hex",
    "MIMC_SEED",
    "MIMC_ROUNDS",
    "round_constants",
    "MimcSponge",
    "TwoToOneHasher",
    "MimcSpongeHasher",
    "Sha256FieldHasher",
    "CallableHasher",
    "get_hasher",
    "as_hasher",
]
