"""
Prompter interface: the interactive-prompt collaborator.

The macro resolver and the wizard build typed question models and hand them
over in one round-trip; how the questions are rendered is up to the
implementation.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from ..models.questions import Question


class IPrompter(ABC):
    """Interface for asking the operator questions."""

    @abstractmethod
    async def prompt_many(self, questions: Sequence[Question]) -> dict[str, Any]:
        """
        Ask all questions in order.

        Args:
            questions: Question models; each ``name`` becomes a key of the result

        Returns:
            Mapping of question name to answer (str for text/list/autocomplete,
            bool for confirm)

        Raises:
            click.Abort: If the operator aborts or input is exhausted
        """
