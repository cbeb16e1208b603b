"""
Module 02 - Merkle Tree and Inclusion Proofs
Deterministic Merkle tree construction + proof generation/verification.

This module provides:
- MerkleTree: immutable tree built once from ordered items
- InclusionProof / ProofStep / Side: self-contained proof values
- build_tree, get_root, get_proof: construction and lookups
- verify_proof: stateless verification against a claimed root
- MerkleContainer: items kept alongside their tree

Commitment Rules:
1. Leaf hashing: hasher.hash_bytes(item)
2. Parent hashing: hasher.combine(left, right) == hash_bytes(left + right)
3. Padding: Combine an unpaired trailing node with itself at any level
4. Empty tree: no root (None)
5. Single leaf: root = leaf, proof is empty

Usage:
    from hashtree.crypto import Sha256Hasher
    from hashtree.merkle import build_tree, get_root, get_proof, verify_proof

    hasher = Sha256Hasher()
    tree = build_tree([b"hello", b"world"], hasher)

    root = get_root(tree)
    proof = get_proof(tree, 0)

    assert verify_proof(b"hello", root, proof, hasher)
    assert not verify_proof(b"world", root, proof, hasher)
"""
from .merkle_proofs import (
    Side,
    ProofStep,
    InclusionProof,
    compute_proof_root,
    verify_proof,
)

from .merkle_tree import (
    Level,
    MerkleTree,
    build_tree,
    get_root,
    get_proof,
    compute_level_count,
)

from .container import MerkleContainer


__all__ = [
    # Core types
    "Level",
    "MerkleTree",
    "Side",
    "ProofStep",
    "InclusionProof",
    # Core functions
    "build_tree",
    "get_root",
    "get_proof",
    "verify_proof",
    "compute_proof_root",
    "compute_level_count",
    # Convenience classes
    "MerkleContainer",
]
