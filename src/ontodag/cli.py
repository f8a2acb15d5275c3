"""
ontodag.cli - Command-line interface.

Main entry point for the ontodag CLI tool.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from ontodag import __version__
from ontodag.commands import config_cmd, export, index, show


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="ontodag",
        description="Parse DAG-format ontologies into a graph of terms",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ontodag show component.dag              # Print the term hierarchy
  ontodag show component.dag --stats      # Term and edge counts
  ontodag export component.dag -o out.json
  ontodag export component.dag --format csv
  ontodag index component.dag --dry-run   # Print search documents
  cat component.dag | ontodag show -      # Read from stdin

Configuration:
  ontodag config path                     # Show config file location
  ontodag config show                     # View all settings

For detailed command help: ontodag <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"ontodag {__version__}",
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
        help="Verbose output",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # show command
    show_parser = subparsers.add_parser(
        "show",
        help="Print the term hierarchy of a DAG file",
    )
    show_parser.add_argument("file", help="DAG file to parse ('-' for stdin)")
    show_parser.add_argument(
        "--depth",
        type=int,
        help="Maximum depth to print below each root",
        metavar="N",
    )
    show_parser.add_argument(
        "--stats",
        action="store_true",
        help="Print term and edge counts instead of the hierarchy",
    )

    # export command
    export_parser = subparsers.add_parser(
        "export",
        help="Export parsed terms as JSON or CSV",
    )
    export_parser.add_argument("file", help="DAG file to parse ('-' for stdin)")
    export_parser.add_argument(
        "--format",
        choices=["json", "csv"],
        help="Output format (default: output.format from config)",
    )
    export_parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Write to file instead of stdout",
        metavar="PATH",
    )

    # index command
    index_parser = subparsers.add_parser(
        "index",
        help="Push parsed terms to the search service",
    )
    index_parser.add_argument("file", help="DAG file to parse ('-' for stdin)")
    index_parser.add_argument("--url", help="Search service base URL (overrides search.url)")
    index_parser.add_argument(
        "--collection", help="Target collection (overrides search.collection)"
    )
    index_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print documents as JSON lines instead of sending them",
    )

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="Inspect configuration",
    )
    config_parser.add_argument(
        "config_action",
        nargs="?",
        choices=["show", "path"],
        help="show: print merged settings, path: print config file location",
    )

    return parser


def configure_logging(verbose: bool, quiet: bool) -> None:
    """Route library logging to stderr at the requested level."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s", stream=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    configure_logging(args.verbose, args.quiet)

    try:
        if args.command == "show":
            return show.run(args)
        elif args.command == "export":
            return export.run(args)
        elif args.command == "index":
            return index.run(args)
        elif args.command == "config":
            return config_cmd.run(args)
        else:
            parser.print_help()
            return 1
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
