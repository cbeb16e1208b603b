"""
Module 03 - File commitments.
"""
from .file_server import FileServer, read_chunk, read_chunk_at

__all__ = [
    "FileServer",
    "read_chunk",
    "read_chunk_at",
]
