"""Rich console singleton for CLI output."""

import sys

from rich.console import Console
from rich.markup import escape

# Windows cp1252 encoding doesn't support Unicode box drawing characters
_safe_box = sys.platform == "win32"

# Global console instance - used across all CLI modules
console = Console(safe_box=_safe_box)


def print_error(message: str) -> None:
    """Print an error message.

    Args:
        message: Error message
    """
    console.print(f"[red]Error: {escape(message)}[/red]")


def print_success(message: str) -> None:
    console.print(f"[green]{message}[/green]")
