"""
courseindex.cli - Command-line interface.

Main entry point for the courseindex CLI tool.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from courseindex import __version__
from courseindex.commands import check, config_cmd, init, list_cmd, menu, show
from courseindex.config import get_config
from courseindex.core import CatalogError
from courseindex.utilities.logging_utils import configure_logging, resolve_level


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="courseindex",
        description="Course catalog index and prerequisite-checked loader",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  courseindex check courses.csv          # Validate a catalog file
  courseindex list courses.csv           # Print all courses in order
  courseindex show courses.csv CS200     # Print one course and its prerequisites
  courseindex menu                       # Interactive course planner

Configuration:
  courseindex init                       # Create .courseindex.toml here
  courseindex config show                # View effective settings
  courseindex config path                # Show config file location

For detailed command help: courseindex <command> --help
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"courseindex {__version__}",
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
        help="Verbose output (debug logging)",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress non-error output",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # check command
    check_parser = subparsers.add_parser(
        "check",
        help="Load a catalog file and report skipped records",
    )
    _add_file_argument(check_parser)
    _add_json_argument(check_parser)

    # list command
    list_parser = subparsers.add_parser(
        "list",
        help="Print all courses in alphanumeric order",
    )
    _add_file_argument(list_parser)
    _add_json_argument(list_parser)

    # show command
    show_parser = subparsers.add_parser(
        "show",
        help="Print courses with their prerequisites",
    )
    show_parser.add_argument(
        "courses",
        nargs="+",
        help="Course numbers to show (case-insensitive)",
        metavar="COURSE",
    )
    show_parser.add_argument(
        "-f",
        "--file",
        type=Path,
        help="Catalog file (default: catalog.default_file)",
        metavar="FILE",
    )
    _add_json_argument(show_parser)

    # menu command
    menu_parser = subparsers.add_parser(
        "menu",
        help="Interactive course planner",
    )
    _add_file_argument(menu_parser, help_text="Catalog file to load on start")

    # init command
    init_parser = subparsers.add_parser(
        "init",
        help="Create .courseindex.toml configuration",
    )
    init_parser.add_argument(
        "--directory",
        type=Path,
        help="Directory to create the file in (default: current directory)",
        metavar="PATH",
    )
    init_parser.add_argument(
        "--default-file",
        help="Catalog file used when none is given",
        metavar="FILE",
    )
    init_parser.add_argument(
        "--force",
        action="store_true",
        help="Overwrite an existing configuration file",
    )

    # config command
    config_parser = subparsers.add_parser(
        "config",
        help="View configuration",
    )
    config_subparsers = config_parser.add_subparsers(dest="config_action")
    config_show = config_subparsers.add_parser(
        "show",
        help="Show effective configuration",
    )
    _add_json_argument(config_show)
    config_subparsers.add_parser(
        "path",
        help="Show path to configuration file",
    )

    return parser


def _add_file_argument(
    subparser: argparse.ArgumentParser,
    help_text: str = "Catalog file (default: catalog.default_file)",
) -> None:
    subparser.add_argument(
        "file",
        nargs="?",
        type=Path,
        help=help_text,
        metavar="FILE",
    )


def _add_json_argument(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Output JSON for tooling",
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
    # Install with: pip install courseindex[completion]
    try:
        import argcomplete

        argcomplete.autocomplete(parser)
    except ImportError:
        pass

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    try:
        config = get_config(args.config)
        configure_logging(resolve_level(config, verbose=args.verbose, quiet=args.quiet))

        if args.command == "check":
            return check.run(args)
        elif args.command == "list":
            return list_cmd.run(args)
        elif args.command == "show":
            return show.run(args)
        elif args.command == "menu":
            return menu.run(args)
        elif args.command == "init":
            return init.run(args)
        elif args.command == "config":
            return config_cmd.run(args)
        else:
            parser.print_help()
            return 1

    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except CatalogError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except Exception as e:
        if args.verbose:
            raise
        print(f"Error: {e}", file=sys.stderr)
        return 1
