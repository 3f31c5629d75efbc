"""
Macro resolution against the answer cache.

The answer cache maps a namespace (one per query folder, e.g. ``ads_macro``)
to the macro values given so far. Only macros missing from the namespace
are asked for; cached values are never asked again or overwritten.
"""

from __future__ import annotations

from pathlib import Path

from ...core.interfaces.logger import ILogger
from ...core.interfaces.presenter import IPresenter
from ...core.interfaces.prompter import IPrompter
from ...core.models.questions import TextQuestion
from ..logging import NullLogger
from .discovery import (
    DEFAULT_FUNCTION_MARKER,
    DEFAULT_QUERY_SUFFIX,
    QueryFileTree,
    discover_macros,
)

AnswerCache = dict[str, dict[str, str]]

MACRO_VALUES_TIP = "beside constants you can use :YYYYMMDD-N values and expressions (${..})"


class MacroResolver:
    """
    Finds the macros of a query folder and fills in their values.

    Usage:
        resolver = MacroResolver(prompter, presenter)
        macros = await resolver.resolve("ads-queries", answers, "ads_macro")
    """

    def __init__(
        self,
        prompter: IPrompter,
        presenter: IPresenter,
        logger: ILogger | None = None,
        query_suffix: str = DEFAULT_QUERY_SUFFIX,
        function_marker: str = DEFAULT_FUNCTION_MARKER,
    ) -> None:
        self._prompter = prompter
        self._presenter = presenter
        self._logger = logger or NullLogger()
        self._query_suffix = query_suffix
        self._function_marker = function_marker

    def discover(self, directory: str | Path) -> list[str]:
        """Macro names used by the query files below ``directory``."""
        files = QueryFileTree(directory, self._query_suffix)
        names = discover_macros(files, self._function_marker)
        self._logger.debug("Found macros %s in %s", names, directory)
        return names

    async def resolve(
        self,
        directory: str | Path,
        answer_cache: AnswerCache,
        namespace: str,
    ) -> dict[str, str]:
        """
        Resolve all macros of ``directory`` within ``namespace``.

        Args:
            directory: Folder with query files
            answer_cache: Cached answers per namespace; updated in place
            namespace: Key of this folder's answers in ``answer_cache``

        Returns:
            ``answer_cache[namespace]`` after merging, or an empty dict when
            the folder uses no macros
        """
        names = self.discover(directory)
        if not names:
            return {}

        cached = answer_cache.get(namespace)
        if not isinstance(cached, dict):
            cached = answer_cache[namespace] = {}
        missing = [name for name in names if name not in cached]
        if missing:
            self._presenter.print(
                "Please enter values for the following macros found in your scripts "
                f"in '{directory}' folder"
            )
            self._presenter.print_tip(MACRO_VALUES_TIP)
            questions = [TextQuestion(name=name, message=name) for name in missing]
            answers = await self._prompter.prompt_many(questions)
            for name, value in answers.items():
                cached.setdefault(name, value)
        return cached
