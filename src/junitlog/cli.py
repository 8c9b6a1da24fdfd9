"""
junitlog.cli - Command-line interface.

Main entry point for the junitlog CLI tool.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from junitlog import __version__
from junitlog.commands import messages, summary
from junitlog.logs import configure_logging

MESSAGE_KINDS = ["errors", "failures", "warnings", "risky", "skipped", "all"]


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="junitlog",
        description="Inspect JUnit XML test logs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  junitlog summary build/junit.xml              # Totals and feedback string
  junitlog summary build/junit.xml --format json
  junitlog summary build/junit.xml --remove     # Delete the log after reading
  junitlog messages build/junit.xml             # All failure/error/... messages
  junitlog messages build/junit.xml --kind failures

Configuration:
  Settings are read from .junitlog.toml or [tool.junitlog] in pyproject.toml,
  searched from the current directory upwards.
        """,
    )

    # Global options
    parser.add_argument(
        "--version",
        action="version",
        version=f"junitlog {__version__}",
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

    # summary command
    summary_parser = subparsers.add_parser(
        "summary",
        help="Show totals and the feedback string of a log",
    )
    summary_parser.add_argument("log", type=Path, help="JUnit XML log file")
    summary_parser.add_argument(
        "--format",
        choices=["text", "json"],
        default=None,
        help="Output format (default: from config, else text)",
    )
    summary_parser.add_argument(
        "--remove",
        action="store_true",
        help="Delete the log file after reading it",
    )

    # messages command
    messages_parser = subparsers.add_parser(
        "messages",
        help="Show formatted messages of non-passing tests",
    )
    messages_parser.add_argument("log", type=Path, help="JUnit XML log file")
    messages_parser.add_argument(
        "--kind",
        choices=MESSAGE_KINDS,
        default="all",
        help="Which messages to show (default: all)",
    )

    return parser


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

    configure_logging(verbose=args.verbose, quiet=args.quiet)

    # Handle no command
    if not args.command:
        parser.print_help()
        return 0

    try:
        if args.command == "summary":
            return summary.run(args)
        elif args.command == "messages":
            return messages.run(args)
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
