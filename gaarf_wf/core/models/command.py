"""
Command execution models.

Provides Pydantic models for the options and results of running an
external command through the command runner.
"""

from __future__ import annotations

from .base import ImmutableModel


class CommandOptions(ImmutableModel):
    """Output visibility options for a single command run.

    Attributes:
        realtime: Echo output while the command runs. None means "decide":
            off when a progress indicator is shown, otherwise off as well
            unless explicitly enabled.
        silent: Do not print captured stderr of a failed command.
        keep_output: Leave echoed output on screen after the command ends.
    """

    realtime: bool | None = None
    silent: bool = False
    keep_output: bool = False


class CommandResult(ImmutableModel):
    """Result of an external command.

    Created once the process has terminated; never mutated afterwards.
    """

    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        """Whether the command exited with code 0."""
        return self.exit_code == 0
