"""
Hashing Unit Tests
Tests for zktree/crypto/mimc.py and zktree/crypto/hashing.py

Tests:
- MiMC round constant schedule
- Sponge determinism and field range
- Hasher adapters and lookup
"""
import hashlib

import pytest
from eth_utils import keccak

from zktree.crypto.field import FIELD_MODULUS
from zktree.crypto.hashing import (
    CallableHasher,
    MimcSpongeHasher,
    Sha256FieldHasher,
    TwoToOneHasher,
    as_hasher,
    get_hasher,
)
from zktree.crypto.mimc import MIMC_ROUNDS, MimcSponge, round_constants
from zktree.merkle.merkle_tree import DEFAULT_ZERO, IncrementalMerkleTree
from zktree.schemas.errors import InvalidArgumentException


class TestRoundConstants:
    """Tests for round_constants()."""

    def test_length_and_endpoints(self):
        """220 constants, first and last forced to zero."""
        constants = round_constants()

        assert len(constants) == MIMC_ROUNDS == 220
        assert constants[0] == 0
        assert constants[-1] == 0

    def test_constants_are_reduced(self):
        assert all(0 <= c < FIELD_MODULUS for c in round_constants())

    def test_keccak_chain(self):
        """Constant i is the i-th keccak of the seed, reduced mod p."""
        digest = keccak(text="mimcsponge")
        digest = keccak(digest)
        assert round_constants()[1] == int.from_bytes(digest, "big") % FIELD_MODULUS
        digest = keccak(digest)
        assert round_constants()[2] == int.from_bytes(digest, "big") % FIELD_MODULUS

    def test_custom_seed_differs(self):
        assert round_constants("other", 10) != round_constants("mimcsponge", 10)


# Empty-subtree values of tornado-core MerkleTreeWithHistory.zeros(0..2)
TORNADO_ZEROS = [
    0x2fe54c60d3acabf3343a35b6eba15db4821b340f76e741e2249685ed4899af6c,
    0x256a6135777eee2fd26f54b8b7037a25439d5235caee224154186d2b8a52e31d,
    0x1151949895e82ab19924de92c40a3d6f7bcb60d92b00504b8199613683f0c200,
]


class TestKnownVectors:
    """Tests pinning the default hash to values published by tornado-core."""

    def test_default_zero_is_tornado_zero(self):
        assert int(DEFAULT_ZERO) == TORNADO_ZEROS[0]

    def test_zeros_match_tornado(self):
        """The MiMC zeros table equals the one deployed in tornado-core."""
        tree = IncrementalMerkleTree(2)
        assert list(tree.zeros) == TORNADO_ZEROS

    def test_hasher_known_answer(self):
        """hash(z0, z0) is tornado's zeros(1)."""
        hasher = MimcSpongeHasher()
        assert hasher.hash(TORNADO_ZEROS[0], TORNADO_ZEROS[0]) == TORNADO_ZEROS[1]
        assert hasher.hash(TORNADO_ZEROS[1], TORNADO_ZEROS[1]) == TORNADO_ZEROS[2]


class TestMimcSponge:
    """Tests for MimcSponge."""

    def test_permutation_deterministic(self):
        sponge = MimcSponge()
        assert sponge.hash(1, 2, 3) == sponge.hash(1, 2, 3)

    def test_permutation_outputs_in_field(self):
        xl, xr = MimcSponge().hash(1, 2, 0)
        assert 0 <= xl < FIELD_MODULUS
        assert 0 <= xr < FIELD_MODULUS

    def test_key_changes_output(self):
        sponge = MimcSponge()
        assert sponge.hash(1, 2, 0) != sponge.hash(1, 2, 1)

    def test_multi_hash_num_outputs(self):
        sponge = MimcSponge()
        outputs = sponge.multi_hash([1, 2], key=0, num_outputs=3)

        assert len(outputs) == 3
        assert outputs[0] == sponge.multi_hash([1, 2])[0]

    def test_multi_hash_absorbs_in_order(self):
        """multi_hash([a, b]) equals absorbing a, permuting, then absorbing b."""
        sponge = MimcSponge()
        r, c = sponge.hash(5, 0, 0)
        r, c = sponge.hash((r + 6) % FIELD_MODULUS, c, 0)

        assert sponge.multi_hash([5, 6]) == [r]


class TestHashers:
    """Tests for the TwoToOneHasher implementations."""

    def test_mimc_hasher_is_sponge_of_pair(self):
        hasher = MimcSpongeHasher()
        assert hasher.hash(1, 2) == MimcSponge().multi_hash([1, 2], 0, 1)[0]

    def test_mimc_hasher_order_matters(self):
        hasher = MimcSpongeHasher()
        assert hasher.hash(1, 2) != hasher.hash(2, 1)

    def test_sha256_hasher_matches_definition(self):
        left, right = 3, 4
        expected = int.from_bytes(
            hashlib.sha256(left.to_bytes(32, "big") + right.to_bytes(32, "big")).digest(),
            "big",
        ) % FIELD_MODULUS

        assert Sha256FieldHasher().hash(left, right) == expected

    def test_hashers_satisfy_protocol(self):
        for hasher in (MimcSpongeHasher(), Sha256FieldHasher(), CallableHasher(max)):
            assert isinstance(hasher, TwoToOneHasher)

    def test_callable_hasher_reduces(self):
        hasher = CallableHasher(lambda left, right: FIELD_MODULUS + left + right)
        assert hasher.hash(1, 2) == 3


class TestHasherLookup:
    """Tests for get_hasher() and as_hasher()."""

    def test_get_hasher_by_name(self):
        assert isinstance(get_hasher("mimc"), MimcSpongeHasher)
        assert isinstance(get_hasher(" SHA256 "), Sha256FieldHasher)

    def test_get_hasher_unknown(self):
        with pytest.raises(InvalidArgumentException, match="Unknown hasher"):
            get_hasher("blake3")

    def test_as_hasher_default(self):
        assert isinstance(as_hasher(None), MimcSpongeHasher)

    def test_as_hasher_passthrough(self):
        hasher = Sha256FieldHasher()
        assert as_hasher(hasher) is hasher

    def test_as_hasher_wraps_callable(self):
        wrapped = as_hasher(lambda left, right: left * right)
        assert isinstance(wrapped, CallableHasher)
        assert wrapped.hash(3, 5) == 15

    def test_as_hasher_rejects_other(self):
        with pytest.raises(InvalidArgumentException):
            as_hasher(42)

    def test_as_hasher_rejects_class(self):
        """A hasher class, not an instance, is rejected up front."""
        with pytest.raises(InvalidArgumentException, match="instance"):
            as_hasher(Sha256FieldHasher)

    def test_tree_rejects_hasher_class(self):
        with pytest.raises(InvalidArgumentException):
            IncrementalMerkleTree(2, hasher=MimcSpongeHasher)
