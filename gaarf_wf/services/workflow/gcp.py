"""
GCP project selection.

Checks that the gcloud CLI is installed and authenticated, then settles on
the project to provision into: the current gcloud project if the operator
accepts it, otherwise one picked from `gcloud projects list` or typed in.
"""

from __future__ import annotations

import os
from typing import Any

from ...core.exceptions import GcloudAuthError, GcloudNotFoundError, ProjectNotFoundError
from ...core.interfaces.presenter import IPresenter
from ...core.interfaces.prompter import IPrompter
from ...core.models.command import CommandOptions
from ...core.models.questions import AutocompleteQuestion, Choice, ConfirmQuestion, TextQuestion
from ...prompting.ask import ask
from ..execution.command_runner import CommandRunner

GCLOUD_INSTALL_URL = "https://cloud.google.com/sdk/docs/install"
AUTH_ERROR_MARKER = "ERROR: (gcloud.auth.print-access-token)"
MANUAL_ITEM = "__MANUAL__"
PROJECTS_LIST_LIMIT = 500

QUIET = CommandOptions(silent=True)


def parse_projects_csv(csv_text: str) -> list[Choice]:
    """
    Turn `gcloud projects list --format="csv(projectId,projectName)"` output
    into choices. The header row and rows without an id are skipped.
    """
    choices = []
    for row in csv_text.splitlines()[1:]:
        cols = row.split(",")
        project_id = cols[0].strip()
        if not project_id:
            continue
        project_name = cols[1].strip() if len(cols) > 1 else ""
        title = f"{project_id} ({project_name})" if project_name else project_id
        choices.append(Choice(title=title, value=project_id))
    return choices


class GcpProjectSelector:
    """Interactive selection of the GCP project, backed by the gcloud CLI."""

    def __init__(
        self,
        runner: CommandRunner,
        prompter: IPrompter,
        presenter: IPresenter,
    ) -> None:
        self._runner = runner
        self._prompter = prompter
        self._presenter = presenter

    async def ensure_gcloud(self) -> None:
        """
        Raises:
            GcloudNotFoundError: gcloud is not installed
            GcloudAuthError: gcloud has no authenticated account
        """
        which = await self._runner.run("which gcloud", QUIET)
        gcloud_path = which.stdout.strip()
        if not which.ok or not gcloud_path or not os.path.exists(gcloud_path):
            raise GcloudNotFoundError(context={"see": GCLOUD_INSTALL_URL})

        auth = await self._runner.run("gcloud auth print-access-token", QUIET)
        if AUTH_ERROR_MARKER in auth.stdout + auth.stderr:
            raise GcloudAuthError()

    async def select_project(self, answers: dict[str, Any]) -> str:
        """
        Return the project id to use, switching gcloud to it if needed.

        Args:
            answers: Known answers; ``use_current_project`` is replayed from it
        """
        await self.ensure_gcloud()

        current = await self._runner.run("gcloud config get-value project 2> /dev/null", QUIET)
        project_id = current.stdout.strip()
        if project_id:
            confirmed = await ask(
                self._prompter,
                [
                    ConfirmQuestion(
                        name="use_current_project",
                        message=(
                            f"Detected current GCP project {project_id}, "
                            "do you want to use it (Y) or choose another (N)?:"
                        ),
                        default=True,
                    )
                ],
                answers,
            )
            if confirmed["use_current_project"]:
                return project_id

        project_id = await self._choose_project()
        if project_id:
            await self._runner.run(f"gcloud config set project {project_id}", QUIET)
        return project_id

    async def _choose_project(self) -> str:
        listing = await self._runner.run(
            'gcloud projects list --format="csv(projectId,projectName)" '
            f"--sort-by=projectId --limit={PROJECTS_LIST_LIMIT}",
            QUIET,
        )
        choices = [Choice(title="Enter manually", value=MANUAL_ITEM), *parse_projects_csv(listing.stdout)]
        picked = await self._prompter.prompt_many(
            [AutocompleteQuestion(name="project_id", message="Please choose a GCP project", choices=choices)]
        )
        project_id = picked["project_id"]
        if project_id != MANUAL_ITEM:
            return project_id

        entered = await self._prompter.prompt_many(
            [TextQuestion(name="project_id", message="Please enter a GCP project id")]
        )
        project_id = entered["project_id"].strip()
        described = await self._runner.run(f"gcloud projects describe {project_id}", QUIET)
        output = described.stdout + described.stderr
        if not described.ok or "ERROR:" in output:
            self._presenter.print(output)
            raise ProjectNotFoundError("Could not set current project", project_id=project_id)
        return project_id
