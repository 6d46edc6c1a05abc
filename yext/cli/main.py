"""
Main CLI entry point for the yext error tools.

Decodes error strings found in logs and response headers back into
structured records.
"""

import argparse
import logging
import os
import sys

from yext import __version__

from ..codec import ErrorStringDecodeError, errors_from_string
from .display import FORMATS, create_display
from .util import graceful_main

FORMAT_ENV_VAR = "YEXT_ERRORS_FORMAT"


def _read_inputs(values: list[str]) -> list[str]:
    """Use positional strings, or non-blank stdin lines when none are given."""
    if values:
        return values
    return [line.rstrip("\n") for line in sys.stdin if line.strip()]


def _decode(args: argparse.Namespace) -> int:
    display = create_display(args.format)
    exit_code = 0
    for text in _read_inputs(args.strings):
        try:
            errs = errors_from_string(text)
        except ErrorStringDecodeError as e:
            print(f"❌ Could not decode: {e}", file=sys.stderr)
            exit_code = 1
            continue
        display.show(errs)
    return exit_code


def build_parser() -> argparse.ArgumentParser:
    default_format = os.getenv(FORMAT_ENV_VAR, "table")
    if default_format not in FORMATS:
        default_format = "table"

    parser = argparse.ArgumentParser(
        prog="yext-errors",
        description="Inspect Yext API error strings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    decode = subparsers.add_parser("decode", help="Decode encoded error strings")
    decode.add_argument(
        "strings",
        nargs="*",
        help="Encoded error strings (read from stdin, one per line, if omitted)",
    )
    decode.add_argument(
        "--format",
        "-f",
        choices=FORMATS,
        default=default_format,
        help=f"Output format (default: {default_format}, or set {FORMAT_ENV_VAR})",
    )
    return parser


def _real_main(argv: list[str]) -> int:
    """Real main CLI logic that handles command parsing and execution."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "decode":
        return _decode(args)

    print(f"❌ Unknown command: {args.command}")
    return 1


def main() -> None:
    """Main CLI entry point with graceful interrupt handling."""
    code = graceful_main(_real_main, sys.argv[1:])
    raise SystemExit(code)


if __name__ == "__main__":
    main()
