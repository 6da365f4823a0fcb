"""Shared helpers for analyzers."""

from __future__ import annotations

from ...scanning.models import SourceUnit

SNIPPET_CONTEXT_LINES = 2


def extract_snippet(content: str, line: int, context: int = SNIPPET_CONTEXT_LINES) -> str:
    """Return ``line`` and ``context`` lines either side, numbered.

    Each line is rendered as ``"%3d: text"``. Returns "" when the line is
    unknown (<= 0) or past the end of the content.
    """
    lines = content.split("\n")
    if line <= 0 or line > len(lines):
        return ""

    start = max(0, line - 1 - context)
    end = min(len(lines), line + context)

    return "".join(f"{i + 1:3d}: {lines[i]}\n" for i in range(start, end))


def snippet_for(unit: SourceUnit, line: int) -> str:
    if not unit.content:
        return ""
    return extract_snippet(unit.content, line)
