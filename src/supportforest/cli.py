"""
supportforest.cli - Command-line interface.

Main entry point for the supportforest CLI tool.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from supportforest import __version__
from supportforest.commands import config_cmd, walk_cmd


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="supportforest",
        description="Parent-pointer forest tools for support graph reduction",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  supportforest root forest.toml voter:alice     # Root and path of one vertex
  supportforest root forest.toml a b --guard visited
  supportforest roots forest.toml -j             # Every vertex, as JSON

Forest files:
  [parents]
  "voter:alice" = "target:bob"                   # child = parent ("role:who")

Configuration:
  supportforest config show     # View effective settings
  supportforest config path     # Show config file location

For detailed command help: supportforest <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"supportforest {__version__}",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to configuration file",
        metavar="PATH",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Verbose output (debug logging, full tracebacks)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    # Subcommands
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # root command
    root_parser = subparsers.add_parser(
        "root",
        help="Find the root and path of one or more vertices",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Vertices are written as "role:who" (role is voter or target, default target).
A "(cycle)" marker means ascent closed on a cycle before reaching a true root.
""",
    )
    root_parser.add_argument("file", type=Path, help="Forest TOML file")
    root_parser.add_argument("nodes", nargs="+", help="Vertices to walk from", metavar="NODE")
    _add_walk_options(root_parser)

    # roots command
    roots_parser = subparsers.add_parser(
        "roots",
        help="Walk from every vertex in a forest",
    )
    roots_parser.add_argument("file", type=Path, help="Forest TOML file")
    _add_walk_options(roots_parser)

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="View configuration",
    )
    config_subparsers = config_parser.add_subparsers(dest="config_action")
    show_parser = config_subparsers.add_parser("show", help="Print effective configuration")
    show_parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output as JSON",
    )
    config_subparsers.add_parser("path", help="Print configuration file location")

    return parser


def _add_walk_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--guard",
        choices=walk_cmd.GUARD_CHOICES,
        help="Cycle guard (default from config: visited)",
    )
    parser.add_argument(
        "--max-depth",
        type=int,
        help="Maximum parent hops per walk (0 = unbounded)",
        metavar="N",
    )
    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()

    # Enable shell tab-completion if argcomplete is installed
    # Install with: pip install supportforest[completion]
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    # Handle no command
    if not args.command:
        parser.print_help()
        return 0

    try:
        # Dispatch to command handlers
        if args.command in ("root", "roots"):
            return walk_cmd.run(args)
        elif args.command == "config":
            return config_cmd.run(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
