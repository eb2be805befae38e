"""Main CLI entry point for word_lookup."""

import argparse
import logging
import sys

from word_lookup import __version__
from word_lookup.cli.commands import lookup, providers
from word_lookup.models import ProviderId


def configure_logging(verbose: bool) -> None:
    """Send log records to stderr, at DEBUG when verbose and WARNING otherwise."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="word-lookup",
        description="Look up word definitions from online dictionaries",
        epilog="Use 'word-lookup <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    # Shared by every subcommand
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--provider",
        choices=[p.value for p in ProviderId],
        help="Dictionary provider to query (overrides WORD_LOOKUP_PROVIDER)",
    )
    common.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # word-lookup lookup <word> [<word> ...]
    lookup_parser = subparsers.add_parser(
        "lookup",
        parents=[common],
        help="Look up one or more words",
        description="Fetch definitions, examples and frequency for each word",
    )
    lookup_parser.add_argument("words", nargs="+", help="Word(s) to look up")
    lookup_parser.add_argument(
        "--from",
        dest="from_language",
        help="Reader's native language (name or code, e.g. 'spanish' or 'es')",
    )
    lookup_parser.add_argument(
        "--to",
        dest="target_language",
        help="Language of the words (name or code, default: en)",
    )
    lookup_parser.add_argument(
        "--json",
        action="store_true",
        help="Print results as JSON",
    )

    # word-lookup providers
    subparsers.add_parser(
        "providers",
        parents=[common],
        help="List configured dictionary providers",
        description="Show which providers are registered and available",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging(getattr(args, "verbose", False))

    # Dispatch to appropriate command
    if args.command == "lookup":
        return lookup.lookup_command(args)
    elif args.command == "providers":
        return providers.providers_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
