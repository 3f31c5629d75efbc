"""
Unit tests for the console presenter.
"""

import io

from rich.console import Console
from rich.status import Status

from gaarf_wf.core.interfaces.progress import IProgress
from gaarf_wf.presenters.console import ConsolePresenter


class TestConsolePresenter:
    """Tests for console output."""

    def test_plain_and_styled_messages_without_color(self, capsys):
        presenter = ConsolePresenter(use_color=False)

        presenter.print("hello")
        presenter.print_dim("Created run-wf.sh")
        presenter.print_success("All done")
        presenter.print_tip("use macros")

        out = capsys.readouterr().out
        assert out == "hello\nCreated run-wf.sh\nAll done\nTip: use macros\n"

    def test_errors_go_to_stderr(self, capsys):
        ConsolePresenter(use_color=False).print_error("boom")

        captured = capsys.readouterr()
        assert captured.err == "boom\n"
        assert captured.out == ""

    def test_color_forced(self, capsys):
        ConsolePresenter(use_color=True).print_warning("careful")

        assert "\x1b[33m" in capsys.readouterr().out

    def test_banner(self):
        buffer = io.StringIO()
        presenter = ConsolePresenter(console=Console(file=buffer, width=40, color_system=None))

        presenter.print_banner("Gaarf Workflow")

        assert "Gaarf Workflow" in buffer.getvalue()

    def test_spinner_is_a_progress_indicator(self):
        spinner = ConsolePresenter().spinner("Deploying")

        assert isinstance(spinner, Status)
        assert isinstance(spinner, IProgress)
