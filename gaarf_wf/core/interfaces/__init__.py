"""
Interface definitions for create-gaarf-wf collaborators.

These define the contracts that implementations must follow so that the
command runner, the macro resolver and the wizard receive their
dependencies explicitly.
"""

from .logger import ILogger
from .presenter import IPresenter
from .progress import IProgress
from .prompter import IPrompter

__all__ = [
    "ILogger",
    "IPresenter",
    "IProgress",
    "IPrompter",
]
