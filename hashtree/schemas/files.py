"""
Module 00 - Schemas
File: files.py

Purpose: Descriptor for a file committed by the file server.
"""

from pydantic import BaseModel, ConfigDict, Field


class FileInfo(BaseModel):
    """
    Public description of a committed file.

    The root hash is the Merkle root over the file's fixed-size chunks
    and identifies the file on the server.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(
        ...,
        description="File name (without directory)",
        min_length=1,
    )
    size: int = Field(
        ...,
        description="File size in bytes",
        ge=1,
    )
    root_hash: str = Field(
        ...,
        description="0x-prefixed hex Merkle root over the file chunks",
        pattern=r"^0x[0-9a-f]+$",
    )
    chunk_size: int = Field(
        ...,
        description="Chunk size in bytes used to split the file",
        ge=1,
    )
    chunk_count: int = Field(
        ...,
        description="Number of chunks (leaves) in the file's tree",
        ge=1,
    )


__all__ = ["FileInfo"]
