"""
Unit tests for macro discovery.

The two stages are tested separately:
- scan_macros / strip_function_block on plain text
- QueryFileTree on a temporary directory tree
"""

import os

from gaarf_wf.services.macros.discovery import (
    QueryFileTree,
    discover_macros,
    scan_macros,
    strip_function_block,
)


class TestScanMacros:
    """Tests for placeholder extraction from text."""

    def test_expression_is_not_a_macro(self):
        assert scan_macros("${foo} {bar}") == ["bar"]

    def test_order_of_first_appearance_without_duplicates(self):
        text = "SELECT {b} FROM t WHERE x = {a} AND y = {b}"
        assert scan_macros(text) == ["b", "a"]

    def test_no_macros(self):
        assert scan_macros("SELECT 1") == []

    def test_macro_may_contain_spaces(self):
        assert scan_macros("{start date}") == ["start date"]

    def test_empty_braces_ignored(self):
        assert scan_macros("{}") == []


class TestStripFunctionBlock:
    """Tests for function-block truncation."""

    def test_text_after_marker_is_dropped(self):
        assert scan_macros(strip_function_block("{a}\nFUNCTIONS\n{b}")) == ["a"]

    def test_marker_is_case_insensitive(self):
        assert strip_function_block("{a}\nfunctions\n{b}") == "{a}\n"

    def test_marker_at_start_truncates_everything(self):
        assert strip_function_block("FUNCTIONS\n{b}") == ""

    def test_no_marker(self):
        assert strip_function_block("{a}") == "{a}"

    def test_custom_marker(self):
        assert strip_function_block("{a} --helpers {b}", "--helpers") == "{a} "


class TestQueryFileTree:
    """Tests for query file enumeration."""

    def test_walks_recursively_in_sorted_order(self, tmp_path):
        (tmp_path / "b.sql").write_text("")
        (tmp_path / "a.sql").write_text("")
        (tmp_path / "notes.txt").write_text("")
        nested = tmp_path / "c"
        nested.mkdir()
        (nested / "z.sql").write_text("")

        files = [p.relative_to(tmp_path).as_posix() for p in QueryFileTree(tmp_path)]

        assert files == ["a.sql", "b.sql", "c/z.sql"]

    def test_missing_directory_yields_nothing(self, tmp_path):
        assert list(QueryFileTree(tmp_path / "missing")) == []

    def test_can_be_iterated_again(self, tmp_path):
        (tmp_path / "a.sql").write_text("")
        tree = QueryFileTree(tmp_path)

        assert list(tree) == list(tree)

    def test_sees_files_added_between_iterations(self, tmp_path):
        tree = QueryFileTree(tmp_path)
        assert list(tree) == []

        (tmp_path / "a.sql").write_text("")

        assert len(list(tree)) == 1

    def test_custom_suffix(self, tmp_path):
        (tmp_path / "a.sql").write_text("")
        (tmp_path / "b.bq").write_text("")

        assert [p.name for p in QueryFileTree(tmp_path, ".bq")] == ["b.bq"]

    def test_symlinked_directory_not_followed(self, tmp_path):
        (tmp_path / "a.sql").write_text("")
        os.symlink(tmp_path, tmp_path / "loop", target_is_directory=True)

        assert [p.name for p in QueryFileTree(tmp_path)] == ["a.sql"]


class TestDiscoverMacros:
    """Tests for combining enumeration and scanning."""

    def test_deduplicates_across_files(self, tmp_path):
        (tmp_path / "a.sql").write_text("SELECT {start_date}, {end_date}")
        (tmp_path / "b.sql").write_text("SELECT {end_date}, {bq_dataset}")

        assert discover_macros(QueryFileTree(tmp_path)) == ["start_date", "end_date", "bq_dataset"]

    def test_function_block_is_skipped_per_file(self, tmp_path):
        (tmp_path / "a.sql").write_text("SELECT {a}\nFUNCTIONS\nfn {b}")
        (tmp_path / "b.sql").write_text("SELECT {c}")

        assert discover_macros(QueryFileTree(tmp_path)) == ["a", "c"]

    def test_works_without_filesystem_enumeration(self, tmp_path):
        query = tmp_path / "q.sql"
        query.write_text("{x}")

        assert discover_macros([query]) == ["x"]

    def test_undecodable_bytes_do_not_stop_the_scan(self, tmp_path):
        query = tmp_path / "q.sql"
        query.write_bytes("SELECT 'caf\xe9' AS c, {x}".encode("latin-1"))

        assert discover_macros(QueryFileTree(tmp_path)) == ["x"]
