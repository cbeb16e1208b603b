"""
Module 02 - Merkle Container
Keeps the original items next to their tree so an item can be served
together with its inclusion proof.
"""
from __future__ import annotations

from typing import Generic, Sequence, TypeVar

from hashtree.crypto.hashing import Digest, Hasher
from hashtree.merkle.merkle_proofs import InclusionProof
from hashtree.merkle.merkle_tree import MerkleTree


ItemT = TypeVar("ItemT", bytes, bytearray, memoryview)


class MerkleContainer(Generic[ItemT]):
    """
    Items plus the Merkle tree committing to them.

    Example:
        >>> container = MerkleContainer([b"a", b"b", b"c"], Sha256Hasher())
        >>> item, proof = container.get_item(2)
        >>> verify_proof(item, container.get_root(), proof, container.hasher)
        True
    """

    def __init__(self, items: Sequence[ItemT], hasher: Hasher) -> None:
        self._items: tuple[ItemT, ...] = tuple(items)
        self._tree = MerkleTree.build(self._items, hasher)

    @property
    def tree(self) -> MerkleTree:
        return self._tree

    @property
    def hasher(self) -> Hasher:
        return self._tree.hasher

    def get_root(self) -> Digest | None:
        return self._tree.get_root()

    def get_item(self, index: int) -> tuple[ItemT, InclusionProof] | None:
        """Return the item at `index` with its proof, or None if out of range."""
        proof = self._tree.get_proof(index)
        if proof is None:
            return None
        return self._items[index], proof

    def __len__(self) -> int:
        return len(self._items)


__all__ = ["MerkleContainer"]
