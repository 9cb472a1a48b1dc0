"""
Schemas - Errors
File: errors.py

Purpose: Error taxonomy for the commitment tree.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes used across the library."""

    # Tree sizing errors
    CAPACITY_EXCEEDED = "CAPACITY_EXCEEDED"
    TREE_FULL = "TREE_FULL"

    # Access errors
    INDEX_OUT_OF_BOUNDS = "INDEX_OUT_OF_BOUNDS"

    # Input errors
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class ZkTreeError(BaseModel):
    """
    Base error model for structured error communication.

    Lets callers pass tree failures across boundaries without raising,
    e.g. when a service wraps the tree and reports errors as JSON.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.TREE_FULL],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )

    def to_exception(self) -> "ZkTreeException":
        """Convert this error model to the matching exception type."""
        exc_type = _EXCEPTIONS_BY_CODE.get(self.code)
        if exc_type is None:
            return ZkTreeException(
                message=self.message,
                code=self.code,
                details=self.details,
                retryable=self.retryable,
            )
        return exc_type(message=self.message, details=dict(self.details))


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class ZkTreeException(Exception):
    """
    Base exception for all commitment tree errors.

    Carries structured error information and can be converted
    to a ZkTreeError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "ZKTREE_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> ZkTreeError:
        """Convert this exception to a ZkTreeError model."""
        return ZkTreeError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class CapacityExceededException(ZkTreeException):
    """Raised when an initial leaf batch is larger than the tree capacity."""

    def __init__(
        self,
        message: str,
        capacity: int | None = None,
        requested: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if capacity is not None:
            full_details["capacity"] = capacity
        if requested is not None:
            full_details["requested"] = requested
        super().__init__(
            message=message,
            code=ErrorCodes.CAPACITY_EXCEEDED,
            details=full_details,
            retryable=False,
        )


class TreeFullException(ZkTreeException):
    """Raised when an insert or bulk insert would overflow the tree."""

    def __init__(
        self,
        message: str,
        capacity: int | None = None,
        leaf_count: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if capacity is not None:
            full_details["capacity"] = capacity
        if leaf_count is not None:
            full_details["leaf_count"] = leaf_count
        super().__init__(
            message=message,
            code=ErrorCodes.TREE_FULL,
            details=full_details,
            retryable=False,
        )


class IndexOutOfBoundsException(ZkTreeException, IndexError):
    """Raised when a leaf index is outside the filled part of the tree."""

    def __init__(
        self,
        message: str,
        index: int | None = None,
        leaf_count: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if index is not None:
            full_details["index"] = index
        if leaf_count is not None:
            full_details["leaf_count"] = leaf_count
        super().__init__(
            message=message,
            code=ErrorCodes.INDEX_OUT_OF_BOUNDS,
            details=full_details,
            retryable=False,
        )


class InvalidArgumentException(ZkTreeException, ValueError):
    """Raised for malformed inputs (bad zero element, empty batch, bad depth)."""

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if argument:
            full_details["argument"] = argument
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_ARGUMENT,
            details=full_details,
            retryable=False,
        )


_EXCEPTIONS_BY_CODE: dict[str, type[ZkTreeException]] = {
    ErrorCodes.CAPACITY_EXCEEDED: CapacityExceededException,
    ErrorCodes.TREE_FULL: TreeFullException,
    ErrorCodes.INDEX_OUT_OF_BOUNDS: IndexOutOfBoundsException,
    ErrorCodes.INVALID_ARGUMENT: InvalidArgumentException,
}
