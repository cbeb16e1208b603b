"""
CLI Commands

Subcommand implementations for the hashtree CLI.
"""

from hashtree_cli.commands import files, tree

__all__ = ["files", "tree"]
