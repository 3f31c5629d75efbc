"""
Answers file handling.

A run can start from the answers of an earlier run (``--answers``) and can
save everything it collected (``--save``). The file is a JSON object; macro
values live under the ``ads_macro`` and ``bq_macro`` keys.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ...core.exceptions import AnswersFileError

DEFAULT_ANSWERS_FILE = "answers.json"


def load_answers(path: str | Path) -> dict[str, Any]:
    """
    Load answers saved by a previous run.

    Raises:
        AnswersFileError: If the file cannot be read or is not a JSON object
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise AnswersFileError("Could not read answers file", file_path=str(path), cause=e) from e
    except json.JSONDecodeError as e:
        raise AnswersFileError("Answers file is not valid JSON", file_path=str(path), cause=e) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise AnswersFileError("Answers file must contain a JSON object", file_path=str(path))
    return data


def save_answers(path: str | Path, answers: dict[str, Any]) -> Path:
    """Write all answers as indented JSON and return the file path."""
    path = Path(path)
    path.write_text(json.dumps(answers, indent=2) + "\n", encoding="utf-8")
    return path
