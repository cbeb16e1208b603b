"""
Module 00 - Error Taxonomy
File: errors.py

Purpose: Errors raised at the edges of the library (configuration,
hasher lookup, file commitments). Tree construction, proof generation
and proof verification never raise; absence is reported as None and
an invalid proof as False.

Defines both Pydantic models for structured error reporting
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Configuration Errors
    UNKNOWN_HASHER = "UNKNOWN_HASHER"
    CONFIG_INVALID = "CONFIG_INVALID"

    # File Commitment Errors
    FILE_READ_ERROR = "FILE_READ_ERROR"
    EMPTY_FILE = "EMPTY_FILE"
    ROOT_COLLISION = "ROOT_COLLISION"
    CHUNK_NOT_FOUND = "CHUNK_NOT_FOUND"

    # Digest & Proof Errors
    INVALID_DIGEST = "INVALID_DIGEST"
    PROOF_INVALID = "PROOF_INVALID"


# =============================================================================
# Pydantic Error Model (Structured Communication)
# =============================================================================

class HashTreeError(BaseModel):
    """
    Structured error model.

    Used by the CLI to report failures as JSON without a traceback.
    """

    model_config = ConfigDict(extra="forbid")

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.UNKNOWN_HASHER],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )

    def to_exception(self) -> "HashTreeException":
        """Convert this error model to a raised exception."""
        return HashTreeException(
            message=self.message,
            code=self.code,
            details=self.details,
        )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class HashTreeException(Exception):
    """
    Base exception for all hashtree errors.

    Carries structured error information and can be converted to a
    HashTreeError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "HASHTREE_ERROR",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_error_model(self) -> HashTreeError:
        """Convert this exception to a HashTreeError model."""
        return HashTreeError(
            code=self.code,
            message=self.message,
            details=self.details,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class UnknownHasherException(HashTreeException):
    """Exception raised when a hasher name is not registered."""

    def __init__(self, name: str, available: list[str] | None = None) -> None:
        available = available or []
        super().__init__(
            message=f"Unknown hasher {name!r} (available: {', '.join(available)})",
            code=ErrorCodes.UNKNOWN_HASHER,
            details={"name": name, "available": available},
        )


class ConfigException(HashTreeException):
    """Exception raised when configuration is missing or invalid."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if key:
            full_details["key"] = key
        super().__init__(
            message=message,
            code=ErrorCodes.CONFIG_INVALID,
            details=full_details,
        )


class FileServerException(HashTreeException):
    """Exception raised when a file cannot be committed or served."""

    def __init__(
        self,
        message: str,
        code: str = ErrorCodes.FILE_READ_ERROR,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if path:
            full_details["path"] = path
        super().__init__(
            message=message,
            code=code,
            details=full_details,
        )


__all__ = [
    "ErrorCodes",
    "HashTreeError",
    "HashTreeException",
    "UnknownHasherException",
    "ConfigException",
    "FileServerException",
]
