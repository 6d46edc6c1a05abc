"""
Utility functions for CLI graceful handling.
"""

from collections.abc import Callable
import sys

CANCELLED_EXIT = 130  # POSIX: 128 + SIGINT (2)


def graceful_main(fn: Callable[[list[str]], int], argv: list[str]) -> int:
    """
    Run fn(argv), turning Ctrl-C into a short message instead of a traceback.

    Returns:
        Exit code (130 for cancelled, or fn's return value)
    """
    try:
        return int(fn(argv) or 0)
    except KeyboardInterrupt:
        sys.stderr.write("\n✖ Cancelled by user\n")
        return CANCELLED_EXIT
