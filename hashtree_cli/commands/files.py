"""
CLI File Commands

Commit the files of a directory chunk by chunk, list their roots, and
check a served chunk against a file root.

Usage:
    hashtree files ./data [--ext txt] [--chunk-size 1024] [--json]
    hashtree check ./data 0x<root> 5 [--ext txt] [--json]
"""

from __future__ import annotations

import json
import logging
import sys
from argparse import Namespace
from dataclasses import asdict, dataclass
from typing import Any

from hashtree.crypto.hashing import from_hex
from hashtree.files.file_server import FileServer
from hashtree.merkle.merkle_proofs import verify_proof
from hashtree.schemas.errors import ErrorCodes, HashTreeError

from hashtree_cli.commands.tree import (
    EXIT_SUCCESS,
    EXIT_RUNTIME_ERROR,
    EXIT_VERIFICATION_FAILED,
    resolve_hasher,
)


logger = logging.getLogger(__name__)


@dataclass
class ChunkCheckSummary:
    """Summary of a chunk check for CLI output."""
    root_hash: str = ""
    chunk_index: int = 0
    found: bool = False
    valid: bool = False
    proof_length: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def open_server(args: Namespace) -> FileServer:
    """Build a FileServer from CLI arguments and configuration."""
    config = getattr(args, "cli_config", None)

    chunk_size = args.chunk_size
    if chunk_size is None:
        chunk_size = config.file_server.chunk_size if config else 1024

    extensions = args.ext
    if extensions is None:
        extensions = config.file_server.extensions if config else []

    logger.info(f"Committing files in {args.directory} (chunk size {chunk_size})")
    return FileServer.from_dir(
        args.directory,
        extensions,
        chunk_size=chunk_size,
        hasher=resolve_hasher(args),
    )


def files_cmd(args: Namespace) -> int:
    """Execute the files command."""
    server = open_server(args)
    infos = server.list_files()

    if args.json:
        print(json.dumps([info.model_dump() for info in infos], indent=2))
        return EXIT_SUCCESS

    if not infos:
        print("No files committed")
        return EXIT_SUCCESS

    print(f"Files available ({server.hasher.name}, chunk size {server.chunk_size}):\n")
    for info in infos:
        print(f"  {info.name}")
        print(f"    size:   {info.size} bytes ({info.chunk_count} chunks)")
        print(f"    root:   {info.root_hash}")

    return EXIT_SUCCESS


def check_cmd(args: Namespace) -> int:
    """Execute the check command."""
    try:
        root = from_hex(args.root)
    except ValueError as e:
        error = HashTreeError(code=ErrorCodes.INVALID_DIGEST, message=str(e))
        if args.json:
            print(json.dumps(error.model_dump(), indent=2))
        else:
            print(f"Error: {error.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    server = open_server(args)
    summary = ChunkCheckSummary(root_hash=args.root, chunk_index=args.chunk)

    served = server.get_file_chunk(root, args.chunk)
    if served is not None:
        proof, chunk = served
        summary.found = True
        summary.proof_length = len(proof)
        summary.valid = verify_proof(chunk, root, proof, server.hasher)

    if args.json:
        print(json.dumps(summary.to_dict(), indent=2))
    elif not summary.found:
        print(f"Chunk #{args.chunk} of file {args.root} not found")
    else:
        print(f"Chunk #{args.chunk} of file {args.root} is {'VALID' if summary.valid else 'INVALID'}")

    if not summary.found:
        logger.warning(f"{ErrorCodes.CHUNK_NOT_FOUND}: chunk {args.chunk} of {args.root}")
    return EXIT_SUCCESS if summary.valid else EXIT_VERIFICATION_FAILED


__all__ = [
    "ChunkCheckSummary",
    "open_server",
    "files_cmd",
    "check_cmd",
]
