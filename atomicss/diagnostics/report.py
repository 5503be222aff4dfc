"""Diagnostics helpers."""

from __future__ import annotations

from collections.abc import Iterable

from atomicss.diagnostics.diagnostic import Diagnostic
from atomicss.text import line_col


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(d.severity == "error" for d in diagnostics)


def render_diagnostic(source: str, diagnostic: Diagnostic, *, source_name: str = "<source>") -> str:
    """Render a diagnostic with the offending source line underlined.

    Only the first line of a multi-line span is underlined.
    """
    start = min(diagnostic.range.start.value, len(source))
    line, column = line_col(source, diagnostic.range.start)
    line_start = source.rfind("\n", 0, start) + 1
    line_end = source.find("\n", start)
    if line_end == -1:
        line_end = len(source)
    line_text = source[line_start:line_end].rstrip("\r")

    underline_end = min(diagnostic.range.end.value, line_start + len(line_text))
    width = max(1, underline_end - start)
    gutter = " " * len(str(line))

    lines = [
        f"{diagnostic.severity}[{diagnostic.code}]: {diagnostic.message}",
        f"{gutter}--> {source_name}:{line}:{column}",
        f"{gutter} |",
        f"{line} | {line_text}",
        f"{gutter} | {' ' * (column - 1)}{'^' * width}",
    ]
    if diagnostic.hint:
        lines.append(f"{gutter} = hint: {diagnostic.hint}")
    return "\n".join(lines)
