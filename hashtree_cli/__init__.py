"""
hashtree CLI

Command-line interface for building Merkle trees and checking proofs.

Usage:
    python -m hashtree_cli root hello world
    python -m hashtree_cli prove 0 hello world
    python -m hashtree_cli files ./data --ext txt
    python -m hashtree_cli check ./data 0x<root> 5
"""

__version__ = "0.1.0"
