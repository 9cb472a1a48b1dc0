"""
Crypto - Prime Field Elements
Field elements of the BN254 scalar field, represented as plain ints.

This module provides:
- FIELD_MODULUS: the BN254 scalar field prime (circom/snarkjs default)
- field_from_str: parse a canonical decimal string
- field_zero: the additive identity
- to_field: reduce an int into the field
- field_to_hex: fixed-width hex rendering for display

Representation Notes:
- An element is an int in [0, FIELD_MODULUS)
- Canonical string form is base-10 without sign, whitespace or leading "+"
"""
from __future__ import annotations

from zktree.schemas.errors import InvalidArgumentException


# BN254 scalar field modulus (used by circom, snarkjs and most SNARK backends)
FIELD_MODULUS: int = 21888242871839275222246405745257275088548364400416034343698204186575808495617

# Width in bytes of a serialized field element
FIELD_BYTES: int = 32


def field_zero() -> int:
    """Return the additive identity of the field."""
    return 0


def field_from_str(value: str) -> int:
    """
    Parse a field element from its canonical decimal string.

    Args:
        value: Base-10 digits, e.g. "21663839004416932945382355908790599225266501822907911457504978515578255421292"

    Returns:
        The element as an int in [0, FIELD_MODULUS)

    Raises:
        InvalidArgumentException: If the string is not plain decimal digits
            or encodes a value outside the field
    """
    if not isinstance(value, str):
        raise InvalidArgumentException(
            f"Field element must be given as a decimal string, got {type(value).__name__}",
            argument="value",
        )
    if not value or not value.isascii() or not value.isdigit():
        raise InvalidArgumentException(
            f"Invalid field element string: {value[:20]!r}",
            argument="value",
        )

    parsed = int(value)
    if parsed >= FIELD_MODULUS:
        raise InvalidArgumentException(
            "Field element string is not reduced modulo the field prime",
            argument="value",
            details={"value": value},
        )
    return parsed


def to_field(value: int) -> int:
    """
    Reduce an integer into the field.

    Raises:
        InvalidArgumentException: If value is not an int (bool is rejected too)
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentException(
            f"Field element must be an int, got {type(value).__name__}",
            argument="value",
        )
    return value % FIELD_MODULUS


def field_to_hex(value: int) -> str:
    """
    Render a field element as 0x-prefixed, zero-padded 32-byte hex.

    Example:
        >>> field_to_hex(255)
        '0x00000000000000000000000000000000000000000000000000000000000000ff'
    """
    return "0x" + to_field(value).to_bytes(FIELD_BYTES, "big").hex()


__all__ = [
    "FIELD_MODULUS",
    "FIELD_BYTES",
    "field_zero",
    "field_from_str",
    "to_field",
    "field_to_hex",
]
