# =============================================================================
# fmtcheck - clang-format Verification Tool
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Line-anchored diagnostics for formatter replacement spans.

Each span renders as a two-row block. The first row holds a
``<path>:<line>`` header followed by the source line; the second row
underlines the whole line with ``-`` and marks the affected columns with
``^``::

    src/a.ts:1   const x=1;
                 --------^-
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from returns.result import Result, safe

from .errors import ReportError, malformed_report
from .line_index import LineIndex
from .replacements import FileReport

HEADER_PADDING = 3
CARET = "^"
DASH = "-"


@dataclass(frozen=True)
class Diagnostic:
    """A replacement span anchored to a source line."""
    path: Path
    line_number: int
    line: str
    column: int
    length: int

    @property
    def header(self) -> str:
        return f"{self.path}:{self.line_number}"


def underline(line: str, column: int, length: int) -> str:
    """Underline ``line`` with carets over ``[column, column + length)``.

    The result always has exactly ``len(line)`` characters; a span running
    past the end of the line is cut at the line end. A column of -1 (a span
    starting on the previous line's terminator) has no cell of its own.
    """
    end = column + length
    return "".join(CARET if column <= i < end else DASH for i in range(len(line)))


def render_diagnostic(diagnostic: Diagnostic) -> str:
    """Render the two-row display block for one diagnostic."""
    header = diagnostic.header
    spacing = len(header) + HEADER_PADDING
    return (
        f"{header}{' ' * HEADER_PADDING}{diagnostic.line}\n"
        f"{' ' * spacing}{underline(diagnostic.line, diagnostic.column, diagnostic.length)}"
    )


def collect_diagnostics(report: FileReport, text: str) -> Result[list[Diagnostic], ReportError]:
    """Anchor every span of ``report`` to a line of ``text``.

    Args:
        report: Decoded spans for one file
        text: Raw contents of that file

    Returns:
        Result[list[Diagnostic], ReportError]: Diagnostics in ascending offset
        order, or an error when a span does not fit the text
    """
    return _collect_internal(report, text).alt(
        lambda exc: malformed_report(
            f"Replacement report does not match {report.path}: {exc}",
            path=report.path,
            original_error=str(exc),
        )
    )


@safe(exceptions=(ValueError,))
def _collect_internal(report: FileReport, text: str) -> list[Diagnostic]:
    index = LineIndex(text)
    starts = [index.char_offset(span.offset) for span in report.spans]
    ends = [index.char_offset(span.offset + span.length) for span in report.spans]

    diagnostics = []
    for position, start, end in zip(index.locate(starts), starts, ends):
        line = index.line(position.line_number)
        if line.endswith("\r"):
            line = line[:-1]
        diagnostics.append(Diagnostic(
            path=report.path,
            line_number=position.line_number,
            line=line,
            column=position.column,
            length=end - start,
        ))
    return diagnostics
