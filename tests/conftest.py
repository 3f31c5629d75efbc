"""
Shared pytest fixtures for create-gaarf-wf tests.

Provides in-memory stand-ins for the collaborators of the command runner,
the macro resolver and the wizard:
- FakePrompter: answers questions from a dict and records what was asked
- FakePresenter: records every message per kind
- FakeProgress: records start/stop calls
- RecordingLogger: keeps formatted log records in a list
- FakeRunner: command runner answering from canned results
"""

from __future__ import annotations

import io
from collections.abc import Sequence
from typing import Any

import pytest

from gaarf_wf.core.interfaces.logger import ILogger
from gaarf_wf.core.interfaces.presenter import IPresenter
from gaarf_wf.core.interfaces.prompter import IPrompter
from gaarf_wf.core.models.command import CommandOptions, CommandResult
from gaarf_wf.core.models.config import RunnerConfig
from gaarf_wf.core.models.questions import Question
from gaarf_wf.services.execution.command_runner import CommandRunner


class FakeProgress:
    """Progress indicator that records how it was driven."""

    def __init__(self, message: str = "") -> None:
        self.message = message
        self.calls: list[str] = []

    def start(self) -> None:
        self.calls.append("start")

    def stop(self) -> None:
        self.calls.append("stop")


class FakePresenter(IPresenter):
    """Presenter that records messages instead of printing them."""

    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []
        self.spinners: list[FakeProgress] = []

    def _record(self, kind: str, message: str) -> None:
        self.messages.append((kind, message))

    def print(self, message: str) -> None:
        self._record("print", message)

    def print_dim(self, message: str) -> None:
        self._record("dim", message)

    def print_error(self, message: str) -> None:
        self._record("error", message)

    def print_warning(self, message: str) -> None:
        self._record("warning", message)

    def print_success(self, message: str) -> None:
        self._record("success", message)

    def print_tip(self, message: str) -> None:
        self._record("tip", message)

    def print_banner(self, title: str) -> None:
        self._record("banner", title)

    def spinner(self, message: str) -> FakeProgress:
        progress = FakeProgress(message)
        self.spinners.append(progress)
        return progress

    def of_kind(self, kind: str) -> list[str]:
        return [m for k, m in self.messages if k == kind]

    @property
    def text(self) -> str:
        return "\n".join(m for _, m in self.messages)


class FakePrompter(IPrompter):
    """
    Prompter answering from a mapping of question name to answer.

    Every call to prompt_many() is recorded as the list of question names.
    Unknown questions are answered with their default.
    """

    def __init__(self, responses: dict[str, Any] | None = None) -> None:
        self.responses = dict(responses or {})
        self.calls: list[list[str]] = []
        self.questions: list[Question] = []

    async def prompt_many(self, questions: Sequence[Question]) -> dict[str, Any]:
        self.calls.append([q.name for q in questions])
        self.questions.extend(questions)
        answers = {}
        for q in questions:
            if q.name in self.responses:
                answers[q.name] = self.responses[q.name]
            else:
                answers[q.name] = getattr(q, "default", None)
        return answers

    @property
    def asked(self) -> list[str]:
        return [name for call in self.calls for name in call]


class RecordingLogger(ILogger):
    """Logger that keeps formatted messages in memory."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str]] = []
        self.level = "debug"

    def _log(self, level: str, message: str, *args: Any) -> None:
        self.records.append((level, message % args if args else message))

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log("debug", message, *args)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log("info", message, *args)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log("warning", message, *args)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._log("error", message, *args)

    def set_level(self, level: str) -> None:
        self.level = level

    @property
    def messages(self) -> list[str]:
        return [m for _, m in self.records]


@pytest.fixture
def presenter() -> FakePresenter:
    return FakePresenter()


@pytest.fixture
def transcript() -> RecordingLogger:
    return RecordingLogger()


@pytest.fixture
def make_runner(presenter, transcript):
    """
    Factory for a CommandRunner writing echoed output into StringIO buffers.

    Returns:
        Callable(debug=False, diag=False, width=80) -> (runner, stdout, stderr)
    """

    def _make(debug: bool = False, diag: bool = False, width: int = 80):
        out = io.StringIO()
        err = io.StringIO()
        runner = CommandRunner(
            RunnerConfig(debug=debug, diag=diag),
            presenter,
            transcript=transcript,
            stdout=out,
            stderr=err,
            terminal_width=lambda: width,
        )
        return runner, out, err

    return _make


@pytest.fixture
def make_prompter():
    """Factory for a FakePrompter with canned responses."""
    return FakePrompter


@pytest.fixture
def progress() -> FakeProgress:
    return FakeProgress()


@pytest.fixture
def logger() -> RecordingLogger:
    return RecordingLogger()


class FakeRunner:
    """
    Stand-in for CommandRunner.

    Results are looked up by command prefix, longest prefix first; commands
    without a canned result succeed with empty output.
    """

    def __init__(self, results: dict[str, CommandResult] | None = None) -> None:
        self.results = dict(results or {})
        self.commands: list[str] = []
        self.options: dict[str, CommandOptions | None] = {}

    async def run(
        self,
        command: str,
        options: CommandOptions | None = None,
        progress: Any = None,
    ) -> CommandResult:
        self.commands.append(command)
        self.options[command] = options
        if progress is not None:
            progress.start()
            progress.stop()
        for prefix in sorted(self.results, key=len, reverse=True):
            if command.startswith(prefix):
                return self.results[prefix]
        return CommandResult(exit_code=0)

    def ran(self, prefix: str) -> bool:
        return any(c.startswith(prefix) for c in self.commands)


@pytest.fixture
def make_fake_runner():
    """Factory for a FakeRunner with canned results."""
    return FakeRunner
