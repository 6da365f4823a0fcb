"""Tests for code snippet extraction."""

from concurrency_insight.insights.analyzers.helpers import extract_snippet, snippet_for
from concurrency_insight.scanning.models import SourceUnit

CONTENT = "\n".join(f"line {i}" for i in range(1, 11))


class TestExtractSnippet:
    """Numbered context window around a line."""

    def test_window_of_five_lines(self):
        """Two lines either side, three-wide line numbers."""
        assert extract_snippet(CONTENT, 5) == (
            "  3: line 3\n  4: line 4\n  5: line 5\n  6: line 6\n  7: line 7\n"
        )

    def test_window_clipped_at_start(self):
        lines = extract_snippet(CONTENT, 1).splitlines()
        assert lines == ["  1: line 1", "  2: line 2", "  3: line 3"]

    def test_window_clipped_at_end(self):
        assert extract_snippet(CONTENT, 10).splitlines()[-1] == " 10: line 10"

    def test_out_of_range_is_empty(self):
        """Unknown (0) and past-the-end lines give no snippet."""
        assert extract_snippet(CONTENT, 0) == ""
        assert extract_snippet(CONTENT, 11) == ""

    def test_unit_without_content(self):
        assert snippet_for(SourceUnit(path="A.java"), 3) == ""
