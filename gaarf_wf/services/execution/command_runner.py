"""
Command runner for external shell commands.

Runs one command at a time through the shell, captures stdout/stderr, and
controls how much of the output the operator gets to see:

- realtime: output is echoed while the command runs
- silent: captured stderr of a failed command is not printed afterwards
- keep_output: echoed output stays on screen, otherwise it is erased

Usage:
    runner = CommandRunner(settings.runner, presenter, transcript=transcript)
    result = await runner.run("gsutil ls", CommandOptions(silent=True))
"""

from __future__ import annotations

import asyncio
import codecs
import shutil
import sys
from collections.abc import Callable
from typing import TextIO

from ...core.interfaces.logger import ILogger
from ...core.interfaces.presenter import IPresenter
from ...core.interfaces.progress import IProgress
from ...core.models.command import CommandOptions, CommandResult
from ...core.models.config import RunnerConfig
from ..logging import NullLogger
from .scrollback import collect_lines, count_rows, erase_sequence

READ_CHUNK_SIZE = 4096
SPAWN_FAILURE_EXIT_CODE = 127


def _terminal_width() -> int:
    return shutil.get_terminal_size().columns


class CommandRunner:
    """
    Executes external commands sequentially and reports a CommandResult.

    Failures of the command itself are never raised: they are reported by a
    non-zero exit code and the captured stderr.
    """

    def __init__(
        self,
        config: RunnerConfig,
        presenter: IPresenter,
        transcript: ILogger | None = None,
        logger: ILogger | None = None,
        stdout: TextIO | None = None,
        stderr: TextIO | None = None,
        terminal_width: Callable[[], int] | None = None,
    ) -> None:
        """
        Initialize command runner.

        Args:
            config: Runner section of the settings (debug/diag flags)
            presenter: Presenter for echoed commands and surfaced errors
            transcript: Debug transcript, written only in debug mode
            logger: Diagnostic logger
            stdout: Stream for echoed stdout (defaults to sys.stdout at run time)
            stderr: Stream for echoed stderr (defaults to sys.stderr at run time)
            terminal_width: Callable returning the terminal width in columns
        """
        self._config = config
        self._presenter = presenter
        self._transcript = transcript or NullLogger()
        self._logger = logger or NullLogger()
        self._stdout = stdout
        self._stderr = stderr
        self._terminal_width = terminal_width or _terminal_width

    @property
    def out(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def err(self) -> TextIO:
        return self._stderr or sys.stderr

    async def run(
        self,
        command: str,
        options: CommandOptions | None = None,
        progress: IProgress | None = None,
    ) -> CommandResult:
        """
        Run a shell command and wait for it to exit.

        Args:
            command: Command line, executed through the shell
            options: Output visibility options
            progress: Optional progress indicator shown while the command runs

        Returns:
            CommandResult with exit code and full captured output
        """
        options = options or CommandOptions()
        # Unset realtime means no streaming, in particular next to a spinner
        realtime = bool(options.realtime)
        keep_output = options.keep_output or self._config.diag

        if progress is not None:
            progress.start()
        if self._config.is_debug:
            self._presenter.print_dim(command)
            self._transcript.info("Running %s", command)

        try:
            result = await self._execute(command, realtime)
        finally:
            if progress is not None:
                progress.stop()

        if progress is None and realtime and not keep_output:
            self._erase_output(result)

        if result.stderr and not realtime and not options.silent and not result.ok:
            self._presenter.print(result.stderr)

        if self._config.is_debug:
            self._transcript.info(
                "%s return %d exit code\n%s\n%s",
                command,
                result.exit_code,
                result.stdout,
                result.stderr,
            )
        self._logger.debug("Command %r exited with %d", command, result.exit_code)
        return result

    async def _execute(self, command: str, realtime: bool) -> CommandResult:
        """Spawn the process and collect its output until it exits."""
        try:
            process = await asyncio.create_subprocess_shell(
                command,
                stdin=None,  # inherited, so commands can still ask the operator
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            self._logger.error("Failed to start %r: %s", command, e)
            return CommandResult(exit_code=SPAWN_FAILURE_EXIT_CODE, stderr=str(e))

        stdout_buffer = bytearray()
        stderr_buffer = bytearray()
        await asyncio.gather(
            _pump(process.stdout, stdout_buffer, self.out if realtime else None),
            _pump(process.stderr, stderr_buffer, self.err if realtime else None),
        )
        exit_code = await process.wait()

        return CommandResult(
            exit_code=exit_code,
            stdout=stdout_buffer.decode("utf-8", errors="replace"),
            stderr=stderr_buffer.decode("utf-8", errors="replace"),
        )

    def _erase_output(self, result: CommandResult) -> None:
        """Remove the echoed output of a finished command from the terminal."""
        lines = collect_lines(result.stdout, result.stderr)
        if not lines:
            return
        rows = count_rows(lines, self._terminal_width())
        self.out.write(erase_sequence(rows))
        self.out.flush()


async def _pump(
    stream: asyncio.StreamReader | None,
    buffer: bytearray,
    echo: TextIO | None,
) -> None:
    """Copy a process stream into ``buffer``, echoing chunks as they arrive."""
    if stream is None:
        return
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    while True:
        chunk = await stream.read(READ_CHUNK_SIZE)
        if not chunk:
            break
        buffer.extend(chunk)
        if echo is not None:
            echo.write(decoder.decode(chunk))
            echo.flush()
    if echo is not None:
        tail = decoder.decode(b"", final=True)
        if tail:
            echo.write(tail)
            echo.flush()
