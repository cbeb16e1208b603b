"""
CLI Tree Commands

Compute a root or an inclusion proof over items given on the command line
or read from a file (one item per line).

Usage:
    hashtree root hello world [--hasher sdbm] [--json]
    hashtree prove 0 hello world [--json]
    hashtree prove 2 --file items.txt
"""

from __future__ import annotations

import json
import logging
from argparse import Namespace
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

from hashtree.crypto.hashing import DEFAULT_HASHER, Hasher, get_hasher, to_hex
from hashtree.merkle.merkle_proofs import verify_proof
from hashtree.merkle.merkle_tree import MerkleTree


logger = logging.getLogger(__name__)


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


@dataclass
class RootSummary:
    """Summary of a root computation for CLI output."""
    hasher: str = ""
    leaf_count: int = 0
    level_count: int = 0
    root: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class ProofSummary:
    """Summary of a generated proof for CLI output."""
    hasher: str = ""
    index: int = 0
    item: str = ""
    root: str | None = None
    found: bool = False
    verified: bool = False
    steps: list[dict[str, str]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def resolve_hasher(args: Namespace) -> Hasher:
    """Hasher from --hasher, falling back to the loaded configuration."""
    name = getattr(args, "hasher", None)
    if not name:
        config = getattr(args, "cli_config", None)
        name = config.hashing.algorithm if config else DEFAULT_HASHER
    return get_hasher(name)


def load_items(args: Namespace) -> list[bytes]:
    """Items from --file (one per line) or from positional arguments."""
    if getattr(args, "file", None):
        text = Path(args.file).read_text(encoding="utf-8")
        items = [line.encode("utf-8") for line in text.splitlines()]
        logger.info(f"Loaded {len(items)} items from {args.file}")
        return items
    return [item.encode("utf-8") for item in args.items]


def root_cmd(args: Namespace) -> int:
    """Execute the root command."""
    hasher = resolve_hasher(args)
    tree = MerkleTree.build(load_items(args), hasher)
    root = tree.get_root()

    summary = RootSummary(
        hasher=hasher.name,
        leaf_count=tree.leaf_count,
        level_count=tree.level_count,
        root=to_hex(root) if root is not None else None,
    )

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print(summary.root if summary.root is not None else "(empty tree: no root)")

    return EXIT_SUCCESS


def prove_cmd(args: Namespace) -> int:
    """Execute the prove command."""
    hasher = resolve_hasher(args)
    items = load_items(args)
    tree = MerkleTree.build(items, hasher)
    root = tree.get_root()

    summary = ProofSummary(
        hasher=hasher.name,
        index=args.index,
        root=to_hex(root) if root is not None else None,
    )

    proof = tree.get_proof(args.index)
    if proof is None:
        if args.json:
            print(json.dumps(summary.to_dict(), indent=2))
        else:
            print(f"No item at index {args.index} (tree has {tree.leaf_count} items)")
        return EXIT_VERIFICATION_FAILED

    item = items[args.index]
    summary.found = True
    summary.item = item.decode("utf-8", errors="replace")
    summary.steps = [
        {"sibling": to_hex(step.sibling), "side": step.side.value}
        for step in proof
    ]
    summary.verified = verify_proof(item, root, proof, hasher)

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    else:
        print(f"Root:  {summary.root}")
        print(f"Item:  #{args.index} {summary.item!r}")
        print(f"Proof: {len(proof)} step(s)")
        for level, step in enumerate(summary.steps):
            print(f"  [{level}] {step['side']:<5} {step['sibling']}")
        print(f"Verified: {'yes' if summary.verified else 'NO'}")

    return EXIT_SUCCESS if summary.verified else EXIT_VERIFICATION_FAILED


__all__ = [
    "RootSummary",
    "ProofSummary",
    "resolve_hasher",
    "load_items",
    "root_cmd",
    "prove_cmd",
]
