"""
CLI display components for decoded error strings.

Provides different output formats for rendering decoded errors:
- TableDisplay: Rich table with one row per record plus a summary line
- JsonDisplay: One JSON line per decoded input for scripting
- FriendlyDisplay: The end-user message only
"""

from abc import ABC, abstractmethod
import json

from rich.console import Console
from rich.table import Table

from ..errors import (
    ERROR_TYPE_FATAL,
    ERROR_TYPE_WARNING,
    Errors,
    get_num_errors,
    is_not_found_error,
    to_user_friendly_message,
)

_TYPE_STYLES = {
    ERROR_TYPE_FATAL: "bold red",
    ERROR_TYPE_WARNING: "yellow",
}


class ErrorsDisplay(ABC):
    """Base class for decoded error renderers."""

    def __init__(self, console: Console | None = None) -> None:
        """Initialize display."""
        self.console = console or Console()

    @abstractmethod
    def show(self, errs: Errors) -> None:
        """
        Render the records decoded from one input string.

        Args:
            errs: Decoded records (may be empty)
        """
        pass


class TableDisplay(ErrorsDisplay):
    """Rich table display, the default for interactive use."""

    def show(self, errs: Errors) -> None:
        if not errs:
            self.console.print("[dim]No errors[/dim]")
            return

        table = Table(show_header=True, header_style="bold")
        table.add_column("Type")
        table.add_column("Code", justify="right")
        table.add_column("Message")
        table.add_column("Request UUID", style="dim")
        for err in errs:
            table.add_row(
                err.type,
                str(err.code),
                err.message,
                err.request_uuid,
                style=_TYPE_STYLES.get(err.type),
            )
        self.console.print(table)

        summary = f"{get_num_errors(errs)} error(s), {len(errs.warnings())} warning(s)"
        if is_not_found_error(errs):
            summary += " [bold]not found[/bold]"
        self.console.print(summary)


class JsonDisplay(ErrorsDisplay):
    """Outputs each decoded input as a JSON line for machine consumption."""

    def show(self, errs: Errors) -> None:
        print(json.dumps([err.to_dict() for err in errs]), flush=True)


class FriendlyDisplay(ErrorsDisplay):
    """Shows only what an end user would see."""

    def show(self, errs: Errors) -> None:
        print(to_user_friendly_message(errs), flush=True)


FORMATS = ("table", "json", "friendly")


def create_display(format: str = "table", console: Console | None = None) -> ErrorsDisplay:
    """
    Factory function to create appropriate display.

    Args:
        format: Display format ("table", "json", or "friendly")
        console: Console to render to (table format only)

    Returns:
        ErrorsDisplay instance
    """
    if format == "json":
        return JsonDisplay(console=console)
    elif format == "friendly":
        return FriendlyDisplay(console=console)
    else:  # "table" is default
        return TableDisplay(console=console)
