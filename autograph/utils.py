"""Shared output helpers for Autograph.

Provides the Rich console every component prints through, the log sinks that
carry verbose trace messages, and small formatting helpers used by the
application when reporting a run.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from rich.console import Console
from rich.table import Table
from rich.text import Text

console = Console()


# ---------------------------------------------------------------------------
# Log sinks
# ---------------------------------------------------------------------------


@runtime_checkable
class LogSink(Protocol):
    """Destination for verbose trace messages."""

    def v(self, message: str) -> None:
        """Record a verbose message."""
        ...


class ConsoleLog:
    """Prints verbose messages to standard output through the Rich console.

    Markup and highlighting are disabled so that file paths and source
    snippets containing square brackets are printed verbatim.
    """

    def __init__(self, target: Console | None = None) -> None:
        self.console = target or console

    def v(self, message: str) -> None:
        self.console.print(message, markup=False, highlight=False, soft_wrap=True)


class NullLog:
    """Discards every message."""

    def v(self, message: str) -> None:
        pass


class RecordingLog:
    """Keeps messages in memory, in the order they were emitted."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def v(self, message: str) -> None:
        self.messages.append(message)

    def contains(self, fragment: str) -> bool:
        """Return ``True`` if any recorded message contains *fragment*."""
        return any(fragment in message for message in self.messages)


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(0.042)  -> "0.04s"
        format_duration(65.2)   -> "1m 5s"
    """
    if seconds < 0:
        return "0.00s"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.2f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message.

    The message itself is not interpreted as Rich markup.
    """
    console.print(Text.assemble(("Error: ", "bold red"), message), soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
