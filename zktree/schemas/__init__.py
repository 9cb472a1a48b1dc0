"""
Schemas

Purpose: Export the error taxonomy shared by every other module.
"""

from .errors import (
    CapacityExceededException,
    ErrorCodes,
    IndexOutOfBoundsException,
    InvalidArgumentException,
    TreeFullException,
    ZkTreeError,
    ZkTreeException,
)

__all__ = [
    "ErrorCodes",
    "ZkTreeError",
    "ZkTreeException",
    "CapacityExceededException",
    "TreeFullException",
    "IndexOutOfBoundsException",
    "InvalidArgumentException",
]
