"""
Module 01 - Hashing Capabilities
Pluggable hashers used to build and verify Merkle trees.

This module provides:
- Hasher: the capability protocol (hash_bytes + combine)
- Sha256Hasher: SHA-256 digests (production default)
- Djb2Hasher / SdbmHasher: fast 64-bit checksums for testing
- get_hasher: name -> hasher registry lookup
- Hex encoding/decoding with 0x prefix

Capability Contract:
1. hash_bytes(data) is deterministic and side-effect free
2. combine(left, right) == hash_bytes(left + right)
   (left operand's bytes precede right operand's)
3. Every digest from one hasher has the same length (digest_size)

Digests produced by different hashers must never be mixed in one tree
or proof. This is a precondition, not a run-time check.
"""
from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod
from typing import Callable, Protocol, runtime_checkable

from hashtree.schemas.errors import UnknownHasherException


# Digests are plain immutable bytes
Digest = bytes

# Types accepted wherever raw item bytes are expected
BYTES_LIKE = (bytes, bytearray, memoryview)

_U64_MASK = 0xFFFF_FFFF_FFFF_FFFF


@runtime_checkable
class Hasher(Protocol):
    """Capability interface every tree hasher satisfies."""

    name: str
    digest_size: int

    def hash_bytes(self, data: bytes) -> Digest:
        ...

    def combine(self, left: Digest, right: Digest) -> Digest:
        ...


class Sha256Hasher:
    """
    SHA-256 hasher.

    Example:
        >>> Sha256Hasher().hash_bytes(b"hello").hex()
        '2cf24dba5fb0a30e26e83b2ac5b9e29e1b161e5c1fa7425e73043362938b9824'
    """

    name = "sha256"
    digest_size = 32

    def hash_bytes(self, data: bytes) -> Digest:
        return hashlib.sha256(data).digest()

    def combine(self, left: Digest, right: Digest) -> Digest:
        return self.hash_bytes(left + right)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class _Checksum64Hasher(ABC):
    """
    Shared plumbing for 64-bit checksum hashers.

    Subclasses implement `_checksum`, which folds the input into an
    unsigned 64-bit integer. Digests are the 8-byte big-endian encoding.
    """

    name = ""
    digest_size = 8

    @abstractmethod
    def _checksum(self, data: bytes) -> int:
        """Fold `data` into an unsigned 64-bit integer."""
        pass

    def hash_bytes(self, data: bytes) -> Digest:
        return self._checksum(data).to_bytes(self.digest_size, "big")

    def combine(self, left: Digest, right: Digest) -> Digest:
        return self.hash_bytes(left + right)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class Djb2Hasher(_Checksum64Hasher):
    """djb2 checksum: h = h * 33 + c, starting at 5381, wrapping at 2**64."""

    name = "djb2"

    def _checksum(self, data: bytes) -> int:
        value = 5381
        for byte in data:
            value = ((value << 5) + value + byte) & _U64_MASK
        return value


class SdbmHasher(_Checksum64Hasher):
    """sdbm checksum: h = c + (h << 6) + (h << 16) - h, wrapping at 2**64."""

    name = "sdbm"

    def _checksum(self, data: bytes) -> int:
        value = 0
        for byte in data:
            value = (byte + (value << 6) + (value << 16) - value) & _U64_MASK
        return value


_HASHERS: dict[str, Callable[[], Hasher]] = {
    Sha256Hasher.name: Sha256Hasher,
    Djb2Hasher.name: Djb2Hasher,
    SdbmHasher.name: SdbmHasher,
}

DEFAULT_HASHER = Sha256Hasher.name


def available_hashers() -> list[str]:
    """Return the registered hasher names, sorted."""
    return sorted(_HASHERS)


def get_hasher(name: str = DEFAULT_HASHER) -> Hasher:
    """
    Look up a hasher by name.

    Args:
        name: Registered hasher name (case-insensitive)

    Returns:
        A new hasher instance

    Raises:
        UnknownHasherException: If no hasher is registered under `name`
    """
    factory = _HASHERS.get(name.strip().lower())
    if factory is None:
        raise UnknownHasherException(name, available=available_hashers())
    return factory()


def to_hex(data: bytes) -> str:
    """
    Convert bytes to hexadecimal string with 0x prefix.

    Example:
        >>> to_hex(bytes.fromhex("deadbeef"))
        '0xdeadbeef'
    """
    return "0x" + data.hex()


def from_hex(hex_string: str) -> bytes:
    """
    Convert hexadecimal string (with 0x prefix) to bytes.

    Raises:
        ValueError: If string doesn't start with 0x, has odd length,
                   or contains invalid hex characters
    """
    if not hex_string.startswith("0x"):
        raise ValueError(
            f"Hex string must start with '0x' prefix, got: {hex_string[:10]}..."
        )

    hex_content = hex_string[2:]

    if len(hex_content) % 2 != 0:
        raise ValueError(
            f"Hex string must have even length after 0x prefix, "
            f"got length {len(hex_content)}"
        )

    try:
        return bytes.fromhex(hex_content)
    except ValueError as e:
        raise ValueError(f"Invalid hex characters in string: {e}") from e


__all__ = [
    "Digest",
    "BYTES_LIKE",
    "Hasher",
    "Sha256Hasher",
    "Djb2Hasher",
    "SdbmHasher",
    "DEFAULT_HASHER",
    "available_hashers",
    "get_hasher",
    "to_hex",
    "from_hex",
]
