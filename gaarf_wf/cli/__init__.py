"""
Click-based CLI for create-gaarf-wf.

This module provides the single `create-gaarf-wf` command, which runs the
provisioning wizard in a project folder.

Usage:
    from gaarf_wf.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

import asyncio
from pathlib import Path

import click

from .. import __version__
from ..core.exceptions import GaarfWfException
from ..presenters.console import ConsolePresenter
from ..prompting.click_prompter import ClickPrompter
from ..services.execution.command_runner import CommandRunner
from ..services.logging import TranscriptLogger, WorkflowLogger
from ..services.macros.resolver import MacroResolver
from ..services.workflow.answers import DEFAULT_ANSWERS_FILE, save_answers
from ..services.workflow.wizard import ProvisioningWizard
from .context import WorkflowContext


@click.command("create-gaarf-wf")
@click.argument("path", required=False, type=click.Path(file_okay=False, path_type=Path))
@click.option(
    "--answers",
    "answers_file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="JSON file with answers of a previous run",
)
@click.option(
    "--save",
    "--saveAnswers",
    "save_file",
    is_flag=False,
    flag_value=DEFAULT_ANSWERS_FILE,
    default=None,
    help=f"Save all answers into a JSON file (default: {DEFAULT_ANSWERS_FILE})",
)
@click.option("--debug", is_flag=True, help="Echo commands and write a transcript file")
@click.option("--diag", is_flag=True, help="Like --debug, and keep all command output on screen")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file (default: .create-gaarf-wf.toml or pyproject.toml)",
)
@click.version_option(version=__version__, prog_name="create-gaarf-wf")
def cli(
    path: Path | None,
    answers_file: Path | None,
    save_file: str | None,
    debug: bool,
    diag: bool,
    config_path: Path | None,
) -> None:
    """Interactive generator for Gaarf Workflow (Google Ads API Report Fetcher Workflow).

    Asks questions, generates deploy/run/schedule scripts for Google Cloud
    and optionally runs them. PATH is the project folder (created if
    missing, defaults to the current directory).

    \b
    Examples:
        create-gaarf-wf my-project
        create-gaarf-wf --answers answers.json
        create-gaarf-wf --save
    """
    presenter = ConsolePresenter()
    try:
        ctx = WorkflowContext.create(
            path=path,
            answers_file=answers_file,
            save_file=save_file,
            config_path=config_path,
            debug=debug,
            diag=diag,
        )
    except GaarfWfException as e:
        presenter.print_error(str(e))
        raise SystemExit(e.exit_code) from e

    if ctx.settings.config_error:
        presenter.print_warning(ctx.settings.config_error)
    if ctx.answers_file is not None:
        presenter.print(f"Using answers from '{ctx.answers_file}' file")

    _run_wizard(ctx, presenter)

    if ctx.save_file is not None:
        save_answers(ctx.save_file, ctx.answers)
        presenter.print_dim(f"Answers saved into {ctx.save_file}")


def _run_wizard(ctx: WorkflowContext, presenter: ConsolePresenter) -> None:
    """Wire up the wizard's collaborators and run it to completion."""
    settings = ctx.settings
    logger = WorkflowLogger(
        level=settings.logging.level,
        console_enabled=settings.logging.console,
        file_enabled=settings.logging.file,
    )
    transcript = TranscriptLogger(ctx.transcript_path) if settings.runner.is_debug else None
    logger.debug("Settings: %s", settings.to_dict())

    prompter = ClickPrompter()
    runner = CommandRunner(settings.runner, presenter, transcript=transcript, logger=logger)
    resolver = MacroResolver(
        prompter,
        presenter,
        logger,
        query_suffix=settings.macros.query_suffix,
        function_marker=settings.macros.function_marker,
    )
    wizard = ProvisioningWizard(
        ctx.cwd,
        ctx.answers,
        settings,
        runner,
        resolver,
        prompter,
        presenter,
        logger=logger,
        transcript=transcript,
    )

    try:
        asyncio.run(wizard.run())
    except GaarfWfException as e:
        logger.error("Provisioning failed: %s", e)
        presenter.print_error(str(e))
        raise SystemExit(e.exit_code) from e
    finally:
        logger.close()
        if transcript is not None:
            transcript.close()


__all__ = [
    "WorkflowContext",
    "cli",
]
