"""
Common test fixtures shared by all modules.

Provides factory functions for:
- Item lists (bytes) for tree construction
- Directories of files for the file server
"""

from pathlib import Path


LOREM_IPSUM = """Lorem ipsum dolor sit amet, consectetur
    adipiscing elit, sed do eiusmod tempor incididunt ut labore et
    dolore magna aliqua. Ut enim ad minim veniam, quis nostrud
    exercitation ullamco laboris nisi ut aliquip ex ea commodo
    consequat. Duis aute irure dolor in reprehenderit in voluptate
    velit esse cillum dolore eu fugiat nulla pariatur. Excepteur
    sint occaecat cupidatat non proident, sunt in culpa qui
    officia deserunt mollit anim id est laborum."""


def make_items(count: int, prefix: str = "item") -> list[bytes]:
    """Create `count` distinct items: b"item0", b"item1", ..."""
    return [f"{prefix}{i}".encode() for i in range(count)]


def make_lorem_items() -> list[bytes]:
    """Split LOREM_IPSUM into alphabetic words."""
    words = "".join(c if c.isalpha() else " " for c in LOREM_IPSUM).split()
    return [word.encode() for word in words]


def make_data_dir(root: Path, files: dict[str, bytes] | None = None) -> Path:
    """
    Write a directory of files for file-server tests.

    Default layout:
        alpha.txt   (2500 bytes -> 3 chunks of 1024)
        beta.txt    (10 bytes -> 1 chunk)
        notes.md    (100 bytes)
        nested/     (subdirectory, ignored)
    """
    if files is None:
        files = {
            "alpha.txt": bytes(i % 251 for i in range(2500)),
            "beta.txt": b"0123456789",
            "notes.md": b"# notes\n" * 12 + b"end!",
        }

    root.mkdir(parents=True, exist_ok=True)
    for name, content in files.items():
        (root / name).write_bytes(content)

    (root / "nested").mkdir(exist_ok=True)
    (root / "nested" / "inner.txt").write_bytes(b"not committed")

    return root
