"""
Crypto - MiMC Sponge
MiMC-Feistel permutation in sponge mode over the BN254 scalar field,
compatible with circomlib's MiMCSponge template.

Construction:
1. Round constants: c = keccak256("mimcsponge"), then c = keccak256(c)
   for each further round; each constant is c reduced mod p.
   The first and last constants are zero.
2. Round i: t = xL + k + c_i; (xL, xR) = (xR + t^5, xL)
   The final round does not swap: xR = xR + t^5.
3. Sponge: absorb each input into R, permute (R, C) with key k,
   squeeze outputs from R.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Sequence

from eth_utils import keccak

from zktree.crypto.field import FIELD_MODULUS, to_field


MIMC_SEED: str = "mimcsponge"
MIMC_ROUNDS: int = 220


@lru_cache(maxsize=None)
def round_constants(seed: str = MIMC_SEED, rounds: int = MIMC_ROUNDS) -> tuple[int, ...]:
    """
    Derive the MiMC round constants for a seed.

    Args:
        seed: ASCII seed hashed to start the keccak chain
        rounds: Number of Feistel rounds

    Returns:
        Tuple of `rounds` field elements, first and last being zero
    """
    constants = [0] * rounds
    digest = keccak(text=seed)
    for i in range(1, rounds):
        digest = keccak(digest)
        constants[i] = int.from_bytes(digest, "big") % FIELD_MODULUS
    constants[0] = 0
    constants[-1] = 0
    return tuple(constants)


class MimcSponge:
    """
    MiMC sponge with a fixed round-constant schedule.

    Example:
        >>> sponge = MimcSponge()
        >>> out = sponge.multi_hash([1, 2], key=0, num_outputs=1)
        >>> len(out)
        1
    """

    def __init__(self, seed: str = MIMC_SEED, rounds: int = MIMC_ROUNDS) -> None:
        self.rounds = rounds
        self.constants = round_constants(seed, rounds)

    def hash(self, xl: int, xr: int, k: int) -> tuple[int, int]:
        """Apply the keyed Feistel permutation to (xL, xR)."""
        p = FIELD_MODULUS
        xl, xr, k = to_field(xl), to_field(xr), to_field(k)
        last = self.rounds - 1
        for i, c in enumerate(self.constants):
            t = (xl + k + c) % p
            t5 = pow(t, 5, p)
            if i < last:
                xl, xr = (xr + t5) % p, xl
            else:
                xr = (xr + t5) % p
        return xl, xr

    def multi_hash(
        self,
        values: Sequence[int],
        key: int = 0,
        num_outputs: int = 1,
    ) -> list[int]:
        """
        Absorb `values` and squeeze `num_outputs` field elements.

        Args:
            values: Field elements to absorb, in order
            key: Permutation key (circomlib uses 0 for Merkle hashing)
            num_outputs: How many elements to squeeze

        Returns:
            List of num_outputs field elements
        """
        r, c = 0, 0
        for value in values:
            r = (r + to_field(value)) % FIELD_MODULUS
            r, c = self.hash(r, c, key)

        outputs = [r]
        for _ in range(1, num_outputs):
            r, c = self.hash(r, c, key)
            outputs.append(r)
        return outputs


__all__ = [
    "MIMC_SEED",
    "MIMC_ROUNDS",
    "round_constants",
    "MimcSponge",
]
