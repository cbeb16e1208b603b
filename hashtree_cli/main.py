"""
CLI Main Entry Point

Parses command-line arguments and dispatches to subcommands.

Usage:
    python -m hashtree_cli root <item>... [--file PATH] [--hasher NAME] [--json]
    python -m hashtree_cli prove <index> <item>... [--file PATH] [--hasher NAME] [--json]
    python -m hashtree_cli files <dir> [--ext EXT ...] [--chunk-size N] [--json]
    python -m hashtree_cli check <dir> <root> <chunk> [--ext EXT ...] [--json]
    python -m hashtree_cli config --init

Environment Variables:
    HASHTREE_HASHER        Hasher name: sha256, djb2, sdbm (default: sha256)
    HASHTREE_CHUNK_SIZE    File chunk size in bytes (default: 1024)
    HASHTREE_EXTENSIONS    Comma-separated file extensions to commit
    HASHTREE_LOG_LEVEL     Log level (default: INFO)
    HASHTREE_LOG_FILE      Optional log file
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
import traceback
from pathlib import Path
from typing import Sequence

from hashtree.config.runtime import get_default_config_template, load_config
from hashtree.crypto.hashing import available_hashers
from hashtree.schemas.errors import HashTreeException

from hashtree_cli import __version__
from hashtree_cli.commands import files, tree


# Exit codes
EXIT_SUCCESS = 0
EXIT_RUNTIME_ERROR = 1
EXIT_VERIFICATION_FAILED = 2


def setup_logging(level: str = "INFO", log_file: str | None = None) -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=handlers,
        force=True,
    )


def _add_hasher_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--hasher",
        type=str,
        choices=available_hashers(),
        default=None,
        help="Hasher to build the tree with (default: from config or sha256)",
    )


def _add_json_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--json",
        action="store_true",
        default=False,
        help="Output machine-readable JSON",
    )


def _add_server_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "directory",
        type=str,
        help="Directory whose files are committed",
    )
    parser.add_argument(
        "--ext",
        type=str,
        nargs="+",
        default=None,
        help="Only commit files with these extensions (default: from config or all)",
    )
    parser.add_argument(
        "--chunk-size",
        type=int,
        default=None,
        help="Chunk size in bytes (default: from config or 1024)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="hashtree",
        description="Build Merkle trees, generate inclusion proofs and check file chunks.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--config", "-c",
        type=Path,
        default=None,
        help="Path to configuration file (default: ./hashtree.json or ./hashtree.yaml)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Print tracebacks on errors",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- root command ---
    root_parser = subparsers.add_parser(
        "root",
        help="Compute the Merkle root of a list of items",
        description="Hash each item (UTF-8) and print the root digest.",
    )
    root_parser.add_argument("items", nargs="*", default=[], help="Items to commit")
    root_parser.add_argument(
        "--file", "-f",
        type=str,
        default=None,
        help="Read items from a file, one per line (instead of arguments)",
    )
    _add_hasher_argument(root_parser)
    _add_json_argument(root_parser)
    root_parser.set_defaults(func=tree.root_cmd)

    # --- prove command ---
    prove_parser = subparsers.add_parser(
        "prove",
        help="Generate and self-check an inclusion proof",
        description="Build a tree over the items and print the proof for one index.",
    )
    prove_parser.add_argument("index", type=int, help="0-based index of the item to prove")
    prove_parser.add_argument("items", nargs="*", default=[], help="Items to commit")
    prove_parser.add_argument(
        "--file", "-f",
        type=str,
        default=None,
        help="Read items from a file, one per line (instead of arguments)",
    )
    _add_hasher_argument(prove_parser)
    _add_json_argument(prove_parser)
    prove_parser.set_defaults(func=tree.prove_cmd)

    # --- files command ---
    files_parser = subparsers.add_parser(
        "files",
        help="Commit the files of a directory and list their roots",
    )
    _add_server_arguments(files_parser)
    _add_hasher_argument(files_parser)
    _add_json_argument(files_parser)
    files_parser.set_defaults(func=files.files_cmd)

    # --- check command ---
    check_parser = subparsers.add_parser(
        "check",
        help="Fetch a file chunk with its proof and verify it",
    )
    _add_server_arguments(check_parser)
    check_parser.add_argument("root", type=str, help="0x-prefixed file root hash")
    check_parser.add_argument("chunk", type=int, help="0-based chunk index")
    _add_hasher_argument(check_parser)
    _add_json_argument(check_parser)
    check_parser.set_defaults(func=files.check_cmd)

    # --- config command ---
    config_parser = subparsers.add_parser(
        "config",
        help="Manage CLI configuration",
        description="Initialize or display configuration.",
    )
    config_parser.add_argument(
        "--init",
        action="store_true",
        default=False,
        help="Create a template configuration file",
    )
    config_parser.add_argument(
        "--show",
        action="store_true",
        default=False,
        help="Show current configuration",
    )
    config_parser.add_argument(
        "--path",
        type=str,
        default="hashtree.json",
        help="Path for config file (default: hashtree.json)",
    )
    config_parser.set_defaults(func=config_cmd)

    return parser


def config_cmd(args: argparse.Namespace) -> int:
    """Handle config command."""
    if args.init:
        config_path = Path(args.path)
        if config_path.exists():
            print(f"Error: Config file already exists: {config_path}", file=sys.stderr)
            return EXIT_RUNTIME_ERROR

        config_path.write_text(get_default_config_template())
        print(f"Created configuration file: {config_path}")
        print("You can also use environment variables (HASHTREE_* prefix).")
        return EXIT_SUCCESS

    if args.show:
        print(json.dumps(args.cli_config.to_dict(), indent=2))
        return EXIT_SUCCESS

    print("Usage: hashtree config [--init|--show]")
    print("  --init  Create a template configuration file")
    print("  --show  Show current configuration")
    return EXIT_SUCCESS


def main(argv: Sequence[str] | None = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0=success, 1=error, 2=verification failed)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return EXIT_RUNTIME_ERROR

    try:
        config = load_config(args.config)
    except HashTreeException as e:
        print(f"Error loading configuration: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR

    setup_logging(level=args.log_level or config.logging.level, log_file=config.logging.file)

    # Attach config to args for commands to use
    args.cli_config = config

    try:
        return args.func(args)
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except HashTreeException as e:
        if args.debug:
            traceback.print_exc()
        if getattr(args, "json", False):
            print(json.dumps(e.to_error_model().model_dump(), indent=2))
        else:
            print(f"Error: {e.message}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR
    except (OSError, ValueError) as e:
        if args.debug:
            traceback.print_exc()
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_RUNTIME_ERROR


if __name__ == "__main__":
    sys.exit(main())
