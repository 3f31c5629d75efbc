"""
Unit tests for answer replay and the answers file.
"""

import asyncio
import json

import pytest

from gaarf_wf.core.exceptions import AnswersFileError
from gaarf_wf.core.models.questions import ConfirmQuestion, TextQuestion
from gaarf_wf.prompting.ask import ask
from gaarf_wf.services.workflow.answers import load_answers, save_answers


class TestAsk:
    """Tests for asking only unanswered questions."""

    def test_known_answers_are_not_asked(self, make_prompter):
        prompter = make_prompter({"b": "new"})
        answers = {"a": "known"}

        result = asyncio.run(
            ask(
                prompter,
                [TextQuestion(name="a", message="a"), TextQuestion(name="b", message="b")],
                answers,
            )
        )

        assert prompter.calls == [["b"]]
        assert result == {"a": "known", "b": "new"}
        assert answers == {"a": "known", "b": "new"}

    def test_nothing_missing_skips_prompter(self, make_prompter):
        prompter = make_prompter()

        result = asyncio.run(ask(prompter, [ConfirmQuestion(name="ok", message="ok")], {"ok": False}))

        assert prompter.calls == []
        assert result == {"ok": False}

    def test_result_only_has_requested_names(self, make_prompter):
        answers = {"a": "1", "other": "x"}

        result = asyncio.run(ask(make_prompter(), [TextQuestion(name="a", message="a")], answers))

        assert result == {"a": "1"}


class TestAnswersFile:
    """Tests for loading and saving answers."""

    def test_round_trip(self, tmp_path):
        answers = {"name": "demo", "ads_macro": {"start_date": ":YYYYMMDD-7"}, "deploy_wf": False}
        path = save_answers(tmp_path / "answers.json", answers)

        assert load_answers(path) == answers

    def test_saved_file_is_indented(self, tmp_path):
        path = save_answers(tmp_path / "answers.json", {"name": "demo"})

        assert path.read_text() == '{\n  "name": "demo"\n}\n'

    def test_null_content_is_empty(self, tmp_path):
        path = tmp_path / "answers.json"
        path.write_text("null")

        assert load_answers(path) == {}

    def test_missing_file(self, tmp_path):
        with pytest.raises(AnswersFileError, match="Could not read answers file") as exc_info:
            load_answers(tmp_path / "missing.json")

        assert exc_info.value.context["file_path"].endswith("missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "answers.json"
        path.write_text("{not json")

        with pytest.raises(AnswersFileError, match="not valid JSON"):
            load_answers(path)

    def test_not_an_object(self, tmp_path):
        path = tmp_path / "answers.json"
        path.write_text(json.dumps(["a"]))

        with pytest.raises(AnswersFileError, match="JSON object"):
            load_answers(path)
