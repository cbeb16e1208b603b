"""
Test fixtures package for hashtree tests.

Usage:
    from fixtures import make_items, make_data_dir

    def test_something(tmp_path):
        items = make_items(5)
        data_dir = make_data_dir(tmp_path / "data")
"""

from .common import (
    LOREM_IPSUM,
    make_items,
    make_lorem_items,
    make_data_dir,
)

__all__ = [
    "LOREM_IPSUM",
    "make_items",
    "make_lorem_items",
    "make_data_dir",
]
