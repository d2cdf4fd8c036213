"""Main CLI entry point for english_dictionary."""

import argparse
import sys

from english_dictionary import __version__
from english_dictionary.cli.commands import gui, lookup
from english_dictionary.utils import setup_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="english-dictionary",
        description="Look up English words: pronunciation, meaning, example and synonyms",
        epilog="Use 'english-dictionary <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # english-dictionary lookup <word>
    lookup_parser = subparsers.add_parser(
        "lookup",
        help="Look up a word",
        description="Look up a word and print its pronunciation, meaning, example and synonyms",
    )
    lookup_parser.add_argument("word", nargs="+", help="Word to look up")
    lookup_parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Request timeout in seconds (overrides the saved configuration)",
    )
    lookup_parser.add_argument(
        "--play",
        action="store_true",
        help="Open the pronunciation audio, if any, in the default player",
    )

    # english-dictionary gui
    subparsers.add_parser(
        "gui",
        help="Open the dictionary window",
        description="Launch the desktop dictionary window",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.command == "lookup":
        return lookup.lookup_command(args)
    elif args.command == "gui":
        return gui.gui_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
