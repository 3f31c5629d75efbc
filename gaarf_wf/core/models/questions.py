"""
Question models for interactive prompting.

Each kind of question is its own model carrying only the constraints that
make sense for it. ``Question`` is the closed union of all kinds,
discriminated by the ``kind`` field.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Annotated, Literal, Union

from pydantic import Field, model_validator

from .base import ImmutableModel

# Returns an error message for invalid input, None when the input is accepted
Validator = Callable[[str], Union[str, None]]
Transform = Callable[[str], str]


class Choice(ImmutableModel):
    """An entry of an autocomplete list."""

    title: str
    value: str


class TextQuestion(ImmutableModel):
    """Free text input."""

    kind: Literal["text"] = "text"
    name: str
    message: str
    default: str | None = None
    validate_input: Validator | None = Field(default=None, alias="validate")
    transform: Transform | None = None


class ConfirmQuestion(ImmutableModel):
    """Yes/no question."""

    kind: Literal["confirm"] = "confirm"
    name: str
    message: str
    default: bool = True


class ListQuestion(ImmutableModel):
    """Pick exactly one of a fixed list of values."""

    kind: Literal["list"] = "list"
    name: str
    message: str
    choices: list[str]
    default: str | None = None

    @model_validator(mode="after")
    def check_default_is_choice(self) -> ListQuestion:
        if not self.choices:
            raise ValueError(f"List question '{self.name}' needs at least one choice")
        if self.default is not None and self.default not in self.choices:
            raise ValueError(
                f"Default '{self.default}' of question '{self.name}' is not one of its choices"
            )
        return self


class AutocompleteQuestion(ImmutableModel):
    """Pick one entry of a (possibly long) list by typing a prefix."""

    kind: Literal["autocomplete"] = "autocomplete"
    name: str
    message: str
    choices: list[Choice]


Question = Annotated[
    Union[TextQuestion, ConfirmQuestion, ListQuestion, AutocompleteQuestion],
    Field(discriminator="kind"),
]
