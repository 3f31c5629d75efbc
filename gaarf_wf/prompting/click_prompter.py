"""
Click-based implementation of the prompter.

Renders each question kind with click's prompt helpers. Autocomplete lists
accept the number of an entry, its exact value, or a unique prefix of its
title or value.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import click

from ..core.interfaces.prompter import IPrompter
from ..core.models.questions import (
    AutocompleteQuestion,
    Choice,
    ConfirmQuestion,
    ListQuestion,
    Question,
    TextQuestion,
)


def match_choice(choices: Sequence[Choice], text: str) -> Choice | None:
    """
    Find the choice the operator meant.

    Args:
        choices: Available choices, numbered from 1 when displayed
        text: Raw input

    Returns:
        The matching choice, or None if the input is unknown or ambiguous
    """
    text = text.strip()
    if not text:
        return None
    if text.isdigit() and 1 <= int(text) <= len(choices):
        return choices[int(text) - 1]
    for choice in choices:
        if text == choice.value:
            return choice
    lowered = text.lower()
    candidates = [
        c for c in choices if c.title.lower().startswith(lowered) or c.value.lower().startswith(lowered)
    ]
    if len(candidates) == 1:
        return candidates[0]
    return None


class ChoiceMatcher(click.ParamType):
    """Click parameter type resolving input with match_choice()."""

    name = "choice"

    def __init__(self, choices: Sequence[Choice]) -> None:
        self.choices = list(choices)

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> str:
        if isinstance(value, Choice):
            return value.value
        choice = match_choice(self.choices, str(value))
        if choice is None:
            self.fail(f"'{value}' does not match exactly one entry, try again.", param, ctx)
        return choice.value


class ClickPrompter(IPrompter):
    """Asks questions on the terminal using click."""

    async def prompt_many(self, questions: Sequence[Question]) -> dict[str, Any]:
        answers: dict[str, Any] = {}
        for question in questions:
            answers[question.name] = self.ask(question)
        return answers

    def ask(self, question: Question) -> Any:
        """Ask a single question and return its answer."""
        if isinstance(question, TextQuestion):
            return self._ask_text(question)
        if isinstance(question, ConfirmQuestion):
            return click.confirm(question.message, default=question.default)
        if isinstance(question, ListQuestion):
            return click.prompt(
                question.message,
                type=click.Choice(question.choices),
                default=question.default,
                show_choices=True,
            )
        if isinstance(question, AutocompleteQuestion):
            return self._ask_autocomplete(question)
        raise TypeError(f"Unsupported question type: {type(question).__name__}")

    def _ask_text(self, question: TextQuestion) -> str:
        while True:
            value = click.prompt(
                question.message,
                default="" if question.default is None else question.default,
                show_default=bool(question.default),
            )
            if question.transform is not None:
                value = question.transform(value)
            if question.validate_input is not None:
                error = question.validate_input(value)
                if error:
                    click.secho(error, fg="red", err=True)
                    continue
            return value

    def _ask_autocomplete(self, question: AutocompleteQuestion) -> str:
        click.echo(question.message)
        for i, choice in enumerate(question.choices, 1):
            click.echo(f"  {i:>3}. {choice.title}")
        return click.prompt(
            "Type a number or the beginning of a name",
            type=ChoiceMatcher(question.choices),
        )
