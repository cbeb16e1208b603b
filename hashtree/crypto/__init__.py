"""
Core hashing capabilities.

Module 01 provides the pluggable hashers used by the Merkle tree.
"""
from .hashing import (
    Digest,
    BYTES_LIKE,
    Hasher,
    Sha256Hasher,
    Djb2Hasher,
    SdbmHasher,
    DEFAULT_HASHER,
    available_hashers,
    get_hasher,
    to_hex,
    from_hex,
)

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
