"""
Schemas for hashtree.

Error taxonomy and file descriptors shared by the library and the CLI.
"""
from .errors import (
    ErrorCodes,
    HashTreeError,
    HashTreeException,
    UnknownHasherException,
    ConfigException,
    FileServerException,
)
from .files import FileInfo

__all__ = [
    "ErrorCodes",
    "HashTreeError",
    "HashTreeException",
    "UnknownHasherException",
    "ConfigException",
    "FileServerException",
    "FileInfo",
]
