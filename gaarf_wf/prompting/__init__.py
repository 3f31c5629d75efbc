"""
Interactive prompting for create-gaarf-wf.
"""

from .ask import ask
from .click_prompter import ChoiceMatcher, ClickPrompter, match_choice

__all__ = [
    "ChoiceMatcher",
    "ClickPrompter",
    "ask",
    "match_choice",
]
