"""
Module 02 - Merkle Inclusion Proofs
Proof value objects and stateless proof verification.

This module provides:
- Side: which side a sibling digest occupies
- ProofStep: one (sibling, side) pair
- InclusionProof: immutable leaf-to-root sequence of ProofSteps
- compute_proof_root: fold a leaf digest up through a proof
- verify_proof: check an item against a claimed root

Verification needs only the hasher, never the tree. It does not raise:
a malformed, mismatched or forged proof yields False.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Iterator, NamedTuple

from hashtree.crypto.hashing import BYTES_LIKE, Digest, Hasher


class Side(str, Enum):
    """Position of the sibling relative to the node being proved."""

    LEFT = "left"
    RIGHT = "right"


class ProofStep(NamedTuple):
    """A sibling digest and the side it sits on."""

    sibling: Digest
    side: Side


@dataclass(frozen=True)
class InclusionProof:
    """
    Inclusion proof for a single leaf.

    Steps are ordered leaf-to-root. The proof is a plain value: it holds
    no reference to the tree that produced it and cannot be mutated.

    Attributes:
        steps: Tuple of ProofStep, one per level below the root
    """

    steps: tuple[ProofStep, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of pairs but always store a tuple of ProofStep
        steps: list[ProofStep] = []
        for sibling, side in self.steps:
            if not isinstance(sibling, BYTES_LIKE):
                raise TypeError(
                    f"Proof sibling must be bytes-like, got {type(sibling).__name__}"
                )
            steps.append(ProofStep(bytes(sibling), Side(side)))
        object.__setattr__(self, "steps", tuple(steps))

    def __len__(self) -> int:
        return len(self.steps)

    def __iter__(self) -> Iterator[ProofStep]:
        return iter(self.steps)

    def __getitem__(self, position: int) -> ProofStep:
        return self.steps[position]

    @property
    def siblings(self) -> tuple[Digest, ...]:
        """Sibling digests, leaf-to-root."""
        return tuple(step.sibling for step in self.steps)


def _step_parts(step: Any) -> tuple[bytes, Side] | None:
    """Unpack a proof step, or return None if it is malformed."""
    try:
        sibling, side = step
    except (TypeError, ValueError):
        return None

    if not isinstance(sibling, BYTES_LIKE):
        return None

    try:
        side = Side(side)
    except ValueError:
        return None

    return bytes(sibling), side


def compute_proof_root(
    leaf: Digest,
    proof: InclusionProof | Iterable[Any],
    hasher: Hasher,
) -> Digest | None:
    """
    Recompute the root implied by a leaf digest and a proof.

    Algorithm:
    1. Start with the leaf digest
    2. For each step (leaf-to-root):
       - RIGHT sibling: current = combine(current, sibling)
       - LEFT sibling: current = combine(sibling, current)
    3. Return the final digest

    Args:
        leaf: Leaf digest to start from
        proof: Proof steps, leaf-to-root
        hasher: Hasher the tree was built with

    Returns:
        The implied root, or None if the proof is malformed
    """
    try:
        steps = list(proof)
    except TypeError:
        return None

    current = leaf
    for step in steps:
        parts = _step_parts(step)
        if parts is None:
            return None

        sibling, side = parts
        if side is Side.RIGHT:
            current = hasher.combine(current, sibling)
        else:
            current = hasher.combine(sibling, current)

    return current


def verify_proof(
    item: bytes | bytearray | memoryview,
    claimed_root: Digest | None,
    proof: InclusionProof | Iterable[Any],
    hasher: Hasher,
) -> bool:
    """
    Verify that `item` is included under `claimed_root`.

    Args:
        item: Raw item bytes (hashed here to get the leaf). Anything that
            is not bytes-like fails verification
        claimed_root: Root digest the proof is checked against
        proof: InclusionProof produced by get_proof
        hasher: Hasher the tree was built with

    Returns:
        True if the recomputed root equals the claimed root, False otherwise

    Example:
        >>> tree = build_tree([b"hello", b"world"], hasher)
        >>> verify_proof(b"hello", tree.root, tree.get_proof(0), hasher)
        True
    """
    if claimed_root is None or not isinstance(item, BYTES_LIKE):
        return False

    computed = compute_proof_root(hasher.hash_bytes(bytes(item)), proof, hasher)
    return computed is not None and computed == claimed_root


__all__ = [
    "Side",
    "ProofStep",
    "InclusionProof",
    "compute_proof_root",
    "verify_proof",
]
