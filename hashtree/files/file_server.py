"""
Module 03 - File Server
Commit to files chunk by chunk and serve chunks with inclusion proofs.

Each file is split into fixed-size chunks; the final chunk is zero-padded
to the full chunk size. A Merkle tree over the chunks identifies the file
by its root hash. Clients holding a root can verify any chunk they are
served without downloading the rest of the file.

Usage:
    server = FileServer.from_dir("./data", ["txt"], chunk_size=1024)
    info = server.list_files()[0]

    root = from_hex(info.root_hash)
    proof, chunk = server.get_file_chunk(root, 5)
    assert verify_proof(chunk, root, proof, server.hasher)
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator, Sequence

from hashtree.crypto.hashing import Digest, Hasher, Sha256Hasher, to_hex
from hashtree.merkle.merkle_proofs import InclusionProof
from hashtree.merkle.merkle_tree import MerkleTree
from hashtree.schemas.errors import ErrorCodes, FileServerException
from hashtree.schemas.files import FileInfo


logger = logging.getLogger(__name__)


def read_chunk(stream: BinaryIO, chunk_size: int) -> bytes:
    """
    Read one chunk, zero-padding a short read to `chunk_size`.

    Keeps reading until the chunk is full or the stream is exhausted.
    """
    buffer = bytearray()
    while len(buffer) < chunk_size:
        data = stream.read(chunk_size - len(buffer))
        if not data:
            break
        buffer.extend(data)

    return bytes(buffer.ljust(chunk_size, b"\x00"))


def read_chunk_at(path: Path, offset: int, chunk_size: int) -> bytes:
    """Read the chunk starting at byte `offset` of `path`."""
    with open(path, "rb") as f:
        f.seek(offset)
        return read_chunk(f, chunk_size)


def iter_chunks(stream: BinaryIO, chunk_count: int, chunk_size: int) -> Iterator[bytes]:
    for _ in range(chunk_count):
        yield read_chunk(stream, chunk_size)


@dataclass(frozen=True)
class _CommittedFile:
    path: Path
    size: int
    tree: MerkleTree


class FileServer:
    """
    In-memory index of committed files keyed by Merkle root.

    Only the trees are kept in memory; chunk bytes are re-read from
    disk when served.
    """

    def __init__(self, chunk_size: int, hasher: Hasher | None = None) -> None:
        if chunk_size <= 0:
            raise ValueError(f"Chunk size must be positive, got {chunk_size}")
        self.chunk_size = chunk_size
        self.hasher: Hasher = hasher or Sha256Hasher()
        self._files: dict[Digest, _CommittedFile] = {}

    @classmethod
    def from_dir(
        cls,
        dir_path: str | Path,
        allowed_extensions: Sequence[str] = (),
        chunk_size: int = 1024,
        hasher: Hasher | None = None,
    ) -> "FileServer":
        """Create a server and commit every matching file in `dir_path`."""
        server = cls(chunk_size, hasher)
        server.hash_files_from_dir(dir_path, allowed_extensions)
        return server

    def _build_file_tree(self, path: Path) -> tuple[MerkleTree, int]:
        try:
            size = path.stat().st_size
            chunk_count = math.ceil(size / self.chunk_size)
            with open(path, "rb") as f:
                tree = MerkleTree.build(
                    iter_chunks(f, chunk_count, self.chunk_size), self.hasher
                )
        except OSError as e:
            raise FileServerException(
                f"Cannot read file {path}: {e}",
                code=ErrorCodes.FILE_READ_ERROR,
                path=str(path),
            ) from e

        return tree, size

    def hash_file(self, file_path: str | Path) -> Digest:
        """
        Commit a single file.

        Args:
            file_path: Path to a regular file

        Returns:
            The file's Merkle root

        Raises:
            FileServerException: If the file cannot be read, is empty,
                or its root collides with an already committed file
        """
        path = Path(file_path)
        tree, size = self._build_file_tree(path)

        root = tree.get_root()
        if root is None:
            raise FileServerException(
                f"Empty file: {path}",
                code=ErrorCodes.EMPTY_FILE,
                path=str(path),
            )

        if root in self._files:
            raise FileServerException(
                f"Hash ({to_hex(root)}) collision for file {path}",
                code=ErrorCodes.ROOT_COLLISION,
                path=str(path),
                details={
                    "root_hash": to_hex(root),
                    "existing_path": str(self._files[root].path),
                },
            )

        self._files[root] = _CommittedFile(path=path, size=size, tree=tree)
        logger.info(
            f"Committed {path.name}: {size} bytes, {tree.leaf_count} chunks, root {to_hex(root)}"
        )
        return root

    def hash_files_from_dir(
        self,
        dir_path: str | Path,
        allowed_extensions: Sequence[str] = (),
    ) -> list[Digest]:
        """
        Commit every regular file in `dir_path` (non-recursive).

        Args:
            dir_path: Directory to scan
            allowed_extensions: Extensions to accept, with or without a
                leading dot. Empty accepts every file.

        Returns:
            Roots of the committed files, in name order
        """
        directory = Path(dir_path)
        extensions = {ext.lower().lstrip(".") for ext in allowed_extensions}

        try:
            entries = sorted(directory.iterdir())
        except OSError as e:
            raise FileServerException(
                f"Cannot read directory {directory}: {e}",
                code=ErrorCodes.FILE_READ_ERROR,
                path=str(directory),
            ) from e

        roots: list[Digest] = []
        for entry in entries:
            if not entry.is_file():
                continue
            if extensions and entry.suffix.lower().lstrip(".") not in extensions:
                logger.debug(f"Skipping {entry.name}: extension not allowed")
                continue
            roots.append(self.hash_file(entry))

        return roots

    def list_files(self) -> list[FileInfo]:
        """Describe every committed file, sorted by name."""
        infos = [
            FileInfo(
                name=committed.path.name,
                size=committed.size,
                root_hash=to_hex(root),
                chunk_size=self.chunk_size,
                chunk_count=committed.tree.leaf_count,
            )
            for root, committed in self._files.items()
        ]
        return sorted(infos, key=lambda info: (info.name, info.root_hash))

    def get_file_chunk(
        self,
        root_hash: Digest,
        chunk_index: int,
    ) -> tuple[InclusionProof, bytes] | None:
        """
        Fetch one chunk of a committed file together with its proof.

        Args:
            root_hash: Merkle root identifying the file
            chunk_index: 0-based chunk index

        Returns:
            (proof, chunk bytes), or None if the root is unknown, the
            index is out of range, or the file can no longer be read
        """
        committed = self._files.get(root_hash)
        if committed is None:
            return None

        proof = committed.tree.get_proof(chunk_index)
        if proof is None:
            return None

        try:
            data = read_chunk_at(committed.path, chunk_index * self.chunk_size, self.chunk_size)
        except OSError as e:
            logger.warning(f"Cannot read chunk {chunk_index} of {committed.path}: {e}")
            return None

        return proof, data

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, root_hash: object) -> bool:
        return root_hash in self._files


__all__ = [
    "FileServer",
    "read_chunk",
    "read_chunk_at",
]
