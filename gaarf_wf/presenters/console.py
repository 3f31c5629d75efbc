"""
Console presenter for terminal output.

Styles messages with click and draws spinners and the banner with rich.
"""

from __future__ import annotations

import click
from rich.console import Console
from rich.panel import Panel
from rich.status import Status
from rich.text import Text

from ..core.interfaces.presenter import IPresenter


class ConsolePresenter(IPresenter):
    """
    Console output presenter.

    Formats output for human-readable terminal display.
    """

    def __init__(self, use_color: bool | None = None, console: Console | None = None) -> None:
        """
        Initialize console presenter.

        Args:
            use_color: Force colors on/off; None lets click decide (TTY only)
            console: rich Console used for spinners and the banner
        """
        self._color = use_color
        self._console = console or Console(highlight=False)

    def print(self, message: str) -> None:
        """Print a message to output."""
        click.echo(message, color=self._color)

    def print_dim(self, message: str) -> None:
        """Print a gray status line."""
        click.secho(message, fg="bright_black", color=self._color)

    def print_error(self, message: str) -> None:
        """Print an error message to stderr."""
        click.secho(message, fg="red", err=True, color=self._color)

    def print_warning(self, message: str) -> None:
        """Print a warning message."""
        click.secho(message, fg="yellow", color=self._color)

    def print_success(self, message: str) -> None:
        """Print a success message."""
        click.secho(message, fg="green", color=self._color)

    def print_tip(self, message: str) -> None:
        """Print a hint with a yellow 'Tip:' prefix."""
        prefix = click.style("Tip: ", fg="yellow")
        click.echo(prefix + click.style(message, fg="bright_black"), color=self._color)

    def print_banner(self, title: str) -> None:
        """Print the title inside a yellow panel."""
        self._console.print(Panel(Text(title, justify="center", style="bold yellow")))

    def spinner(self, message: str) -> Status:
        """Create a (not yet started) rich spinner."""
        return Status(message, console=self._console, spinner="dots")
