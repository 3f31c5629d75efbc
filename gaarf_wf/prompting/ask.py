"""Asking questions against a mapping of known answers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from ..core.interfaces.prompter import IPrompter
from ..core.models.questions import Question


async def ask(
    prompter: IPrompter,
    questions: Sequence[Question],
    answers: dict[str, Any],
) -> dict[str, Any]:
    """
    Ask only the questions that ``answers`` has no value for.

    New answers are stored in ``answers``, so a saved answers file replays a
    previous run without asking again.

    Returns:
        Answers for all of ``questions``, known and new
    """
    missing = [q for q in questions if q.name not in answers]
    if missing:
        answers.update(await prompter.prompt_many(missing))
    return {q.name: answers[q.name] for q in questions}
