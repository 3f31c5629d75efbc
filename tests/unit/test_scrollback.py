"""
Unit tests for the scrollback helpers.

Tests line normalisation, row counting and the erase sequence.
"""

from gaarf_wf.services.execution.scrollback import (
    CLEAR_SCREEN_DOWN,
    collect_lines,
    count_rows,
    cursor_up,
    erase_sequence,
    normalize_line,
)


class TestNormalizeLine:
    """Tests for carriage-return collapsing."""

    def test_keeps_text_after_last_carriage_return(self):
        assert normalize_line("progress 50%\rprogress 100%") == "progress 100%"

    def test_line_without_carriage_return_unchanged(self):
        assert normalize_line("hello") == "hello"

    def test_trailing_carriage_return_leaves_empty_line(self):
        assert normalize_line("done\r") == ""


class TestCollectLines:
    """Tests for splitting captured output into lines."""

    def test_empty_streams_contribute_nothing(self):
        assert collect_lines("", "", linesep="\n") == []

    def test_stdout_then_stderr(self):
        assert collect_lines("a\nb", "c", linesep="\n") == ["a", "b", "c"]

    def test_trailing_newline_adds_empty_line(self):
        assert collect_lines("a\n", "", linesep="\n") == ["a", ""]

    def test_lines_are_normalized(self):
        lines = collect_lines("progress 50%\rprogress 100%", "", linesep="\n")
        assert lines == ["progress 100%"]


class TestCountRows:
    """Tests for row-count arithmetic."""

    def test_single_wrapped_line(self):
        assert count_rows(["x" * 85], 80) == 2

    def test_two_lines(self):
        assert count_rows(["x" * 10, "x" * 90], 80) == 3

    def test_exact_width_takes_an_extra_row(self):
        assert count_rows(["x" * 80], 80) == 2

    def test_empty_line_takes_one_row(self):
        assert count_rows([""], 80) == 1

    def test_normalized_length_is_counted(self):
        lines = collect_lines("x" * 100 + "\r" + "y" * 10, "", linesep="\n")
        assert count_rows(lines, 80) == 1

    def test_zero_width_does_not_divide_by_zero(self):
        assert count_rows(["abc"], 0) == 4


class TestEraseSequence:
    """Tests for the ANSI erase sequence."""

    def test_single_row_does_not_move_up(self):
        assert erase_sequence(1) == "\r" + CLEAR_SCREEN_DOWN

    def test_moves_up_rows_minus_one(self):
        assert erase_sequence(3) == "\r\x1b[2A\x1b[J"

    def test_cursor_up_zero_is_empty(self):
        assert cursor_up(0) == ""
