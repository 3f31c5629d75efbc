"""
Run context for the create-gaarf-wf CLI.

Provides WorkflowContext, which holds everything the wizard run needs that
comes from the command line: the project folder, the loaded answers and the
settings.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..config import load_config
from ..core.settings import WorkflowSettings
from ..services.workflow.answers import load_answers


@dataclass
class WorkflowContext:
    """Context of one create-gaarf-wf run.

    Attributes:
        cwd: Project folder; the process working directory during the run
        settings: Loaded settings with command line overrides applied
        answers: Answers replayed from --answers, updated during the run
        answers_file: File the answers were loaded from, if any
        save_file: File to save the answers into, if requested
    """

    cwd: Path
    settings: WorkflowSettings
    answers: dict[str, Any] = field(default_factory=dict)
    answers_file: Path | None = None
    save_file: Path | None = None

    @classmethod
    def create(
        cls,
        path: Path | None = None,
        answers_file: Path | None = None,
        save_file: str | None = None,
        config_path: Path | None = None,
        debug: bool = False,
        diag: bool = False,
    ) -> WorkflowContext:
        """Create the context and switch into the project folder.

        The project folder is created if it does not exist yet. The answers
        file is resolved against the invocation directory, the save file
        against the project folder.

        Raises:
            AnswersFileError: If the answers file cannot be loaded
            ConfigFileError: If an explicit config file cannot be loaded
        """
        if answers_file is not None:
            answers_file = answers_file.resolve()
        if config_path is not None:
            config_path = config_path.resolve()

        cwd = Path(path).resolve() if path else Path.cwd()
        cwd.mkdir(parents=True, exist_ok=True)
        os.chdir(cwd)

        settings = load_config(config_path=config_path, start_dir=str(cwd), debug=debug, diag=diag)
        answers = load_answers(answers_file) if answers_file is not None else {}

        return cls(
            cwd=cwd,
            settings=settings,
            answers=answers,
            answers_file=answers_file,
            save_file=cwd / save_file if save_file else None,
        )

    @property
    def transcript_path(self) -> Path:
        """Location of the debug transcript."""
        return self.cwd / self.settings.runner.transcript_file
