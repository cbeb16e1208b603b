"""
Module 02 - Merkle Tree Implementation
Deterministic Merkle tree construction, root lookup and proof generation.

This module provides:
- MerkleTree: immutable level-by-level digest history
- build_tree: hash items and build every level eagerly
- get_root / get_proof: functional accessors over a built tree
- compute_level_count: number of levels for a given leaf count

Commitment Rules (Hard Contracts):
1. Leaf: leaf[i] = hasher.hash_bytes(items[i])
2. Parent: parent = hasher.combine(left, right) = hash_bytes(left + right)
3. Padding: an unpaired trailing node is combined with itself
   Example: [a, b, c] -> [parent(a,b), parent(c,c)] -> [root]
4. Empty input: no levels, no root (get_root returns None)
5. Single item: the leaf level is also the root level

Determinism Notes:
- Leaf order is the input order; this module never sorts
- Levels are built eagerly before the constructor returns and are
  never mutated afterwards
"""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from hashtree.crypto.hashing import BYTES_LIKE, Digest, Hasher
from hashtree.merkle.merkle_proofs import InclusionProof, ProofStep, Side


logger = logging.getLogger(__name__)


Level = tuple[Digest, ...]


def _next_level(level: Level, hasher: Hasher) -> Level:
    """Combine adjacent pairs, duplicating an unpaired trailing node."""
    parents: list[Digest] = []
    for i in range(0, len(level), 2):
        left = level[i]
        right = level[i + 1] if i + 1 < len(level) else left
        parents.append(hasher.combine(left, right))
    return tuple(parents)


def _as_bytes_list(values: Iterable[bytes], what: str) -> list[bytes]:
    """Copy `values` into a list of bytes, rejecting anything not bytes-like."""
    if isinstance(values, (str, *BYTES_LIKE)):
        raise TypeError(
            f"{what} must be a sequence of bytes-like values, "
            f"not a single {type(values).__name__}"
        )

    result: list[bytes] = []
    for position, value in enumerate(values):
        if not isinstance(value, BYTES_LIKE):
            raise TypeError(
                f"{what}[{position}] must be bytes-like, got {type(value).__name__}"
            )
        result.append(bytes(value))
    return result


def compute_level_count(num_leaves: int) -> int:
    """
    Number of levels (leaves to root, inclusive) for `num_leaves` leaves.

    A single leaf has 1 level, two leaves 2, three or four leaves 3.
    An empty tree has 0.
    """
    if num_leaves <= 0:
        return 0

    levels = 1
    n = num_leaves
    while n > 1:
        n = (n + 1) // 2
        levels += 1

    return levels


class MerkleTree:
    """
    Immutable binary hash tree over an ordered sequence of items.

    The tree stores every level of digests, leaves first. Items
    themselves are not retained, only their leaf digests.

    Example:
        >>> tree = MerkleTree.build([b"hello", b"world"], Sha256Hasher())
        >>> proof = tree.get_proof(0)
        >>> verify_proof(b"hello", tree.root, proof, tree.hasher)
        True
        >>> tree.get_proof(2) is None
        True
    """

    __slots__ = ("_hasher", "_levels")

    def __init__(self, leaves: Iterable[Digest], hasher: Hasher) -> None:
        """
        Build every level above `leaves`.

        The constructor only takes leaf digests; the upper levels are
        always derived here, so a tree cannot hold inconsistent levels.
        Prefer `build` (items) or `from_leaves` (digests).
        """
        current: Level = tuple(_as_bytes_list(leaves, "leaves"))
        levels: list[Level] = []

        if current:
            levels.append(current)
            while len(current) > 1:
                current = _next_level(current, hasher)
                levels.append(current)

        self._hasher = hasher
        self._levels: tuple[Level, ...] = tuple(levels)

        if levels:
            logger.debug(
                f"Built Merkle tree: {len(levels[0])} leaves, {len(levels)} levels ({hasher.name})"
            )
        else:
            logger.debug("Built empty Merkle tree")

    @classmethod
    def from_leaves(cls, leaves: Iterable[Digest], hasher: Hasher) -> "MerkleTree":
        """
        Build a tree from precomputed leaf digests.

        Args:
            leaves: Leaf digests in order (all produced by `hasher`)
            hasher: Hasher used to combine nodes

        Returns:
            Fully built MerkleTree

        Raises:
            TypeError: If `leaves` is itself bytes-like or holds a
                non-bytes-like element
        """
        return cls(leaves, hasher)

    @classmethod
    def build(cls, items: Iterable[bytes], hasher: Hasher) -> "MerkleTree":
        """
        Hash every item and build the tree.

        Args:
            items: Ordered data items (bytes-like)
            hasher: Hasher for leaves and parents

        Returns:
            Fully built MerkleTree (empty if `items` is empty)

        Raises:
            TypeError: If `items` is itself bytes-like (a single item
                rather than a sequence) or holds a non-bytes-like element
        """
        return cls(
            [hasher.hash_bytes(item) for item in _as_bytes_list(items, "items")],
            hasher,
        )

    @property
    def hasher(self) -> Hasher:
        return self._hasher

    @property
    def levels(self) -> tuple[Level, ...]:
        """All levels, leaf level first and root level last."""
        return self._levels

    @property
    def leaves(self) -> Level:
        return self._levels[0] if self._levels else ()

    @property
    def leaf_count(self) -> int:
        return len(self.leaves)

    @property
    def level_count(self) -> int:
        return len(self._levels)

    @property
    def root(self) -> Digest | None:
        return self.get_root()

    def is_empty(self) -> bool:
        return not self._levels

    def get_root(self) -> Digest | None:
        """Return the root digest, or None for a tree built from zero items."""
        if not self._levels:
            return None
        return self._levels[-1][0]

    def get_proof(self, index: int) -> InclusionProof | None:
        """
        Generate the inclusion proof for the leaf at `index`.

        Algorithm:
        1. Start at `pos = index` in the leaf level
        2. For each level below the root:
           - Even pos: sibling is pos + 1 (or pos itself if unpaired), side RIGHT
           - Odd pos: sibling is pos - 1, side LEFT
           - Move up: pos = pos // 2

        Args:
            index: 0-based leaf index

        Returns:
            InclusionProof with level_count - 1 steps, or None if `index`
            is out of range (always None for an empty tree)
        """
        if isinstance(index, bool) or not isinstance(index, int):
            return None
        if index < 0 or index >= self.leaf_count:
            return None

        steps: list[ProofStep] = []
        pos = index

        for level in self._levels[:-1]:
            if pos % 2 == 0:
                sibling_index = pos + 1 if pos + 1 < len(level) else pos
                steps.append(ProofStep(level[sibling_index], Side.RIGHT))
            else:
                steps.append(ProofStep(level[pos - 1], Side.LEFT))
            pos //= 2

        return InclusionProof(tuple(steps))

    def __len__(self) -> int:
        return self.leaf_count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MerkleTree):
            return NotImplemented
        return self._levels == other._levels

    def __hash__(self) -> int:
        return hash(self._levels)

    def __repr__(self) -> str:
        root = self.get_root()
        root_hex = root.hex() if root is not None else None
        return (
            f"MerkleTree(leaves={self.leaf_count}, levels={self.level_count}, "
            f"root={root_hex!r}, hasher={self._hasher.name!r})"
        )


def build_tree(items: Sequence[bytes] | Iterable[bytes], hasher: Hasher) -> MerkleTree:
    """Build a MerkleTree from ordered data items."""
    return MerkleTree.build(items, hasher)


def get_root(tree: MerkleTree) -> Digest | None:
    """Root digest of `tree`, or None if it was built from zero items."""
    return tree.get_root()


def get_proof(tree: MerkleTree, index: int) -> InclusionProof | None:
    """Inclusion proof for leaf `index` of `tree`, or None if out of range."""
    return tree.get_proof(index)


__all__ = [
    "Level",
    "MerkleTree",
    "build_tree",
    "get_root",
    "get_proof",
    "compute_level_count",
]
