#!/usr/bin/env python3
"""
Console helpers for status messages and warnings.
Charts go to stdout, everything else goes to stderr through rich.
"""

from rich.console import Console
from rich.markup import escape

err_console = Console(stderr=True, highlight=False)


def warn(message: str) -> None:
    """Print a warning on stderr."""
    err_console.print(f"[yellow]Warning:[/yellow] {escape(message)}")


def error(message: str) -> None:
    """Print an error on stderr."""
    err_console.print(f"[bold red]Error:[/bold red] {escape(message)}")


def status(message: str) -> None:
    """Print a dim status line on stderr."""
    err_console.print(f"[dim]{escape(message)}[/dim]")
