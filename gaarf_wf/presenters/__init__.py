"""
Output presenters for create-gaarf-wf.
"""

from .console import ConsolePresenter

__all__ = ["ConsolePresenter"]
