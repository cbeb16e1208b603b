"""
hashtree - binary Merkle trees with inclusion proofs.

Build a tree once from ordered byte items, publish its root, and hand out
compact proofs that any holder of the root can check with the same hasher.
"""
from hashtree.crypto import (
    Hasher,
    Sha256Hasher,
    Djb2Hasher,
    SdbmHasher,
    get_hasher,
)
from hashtree.merkle import (
    MerkleTree,
    InclusionProof,
    ProofStep,
    Side,
    build_tree,
    get_root,
    get_proof,
    verify_proof,
)

__version__ = "0.1.0"

__all__ = [
    "Hasher",
    "Sha256Hasher",
    "Djb2Hasher",
    "SdbmHasher",
    "get_hasher",
    "MerkleTree",
    "InclusionProof",
    "ProofStep",
    "Side",
    "build_tree",
    "get_root",
    "get_proof",
    "verify_proof",
]
