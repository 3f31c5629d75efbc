"""
Pydantic models for create-gaarf-wf.
"""

from .base import ImmutableModel, WorkflowBaseModel
from .command import CommandOptions, CommandResult
from .config import (
    GcpConfig,
    LoggingConfig,
    MacrosConfig,
    RunnerConfig,
)
from .questions import (
    AutocompleteQuestion,
    Choice,
    ConfirmQuestion,
    ListQuestion,
    Question,
    TextQuestion,
)

__all__ = [
    "AutocompleteQuestion",
    "Choice",
    "CommandOptions",
    "CommandResult",
    "ConfirmQuestion",
    "GcpConfig",
    "ImmutableModel",
    "ListQuestion",
    "LoggingConfig",
    "MacrosConfig",
    "Question",
    "RunnerConfig",
    "TextQuestion",
    "WorkflowBaseModel",
]
