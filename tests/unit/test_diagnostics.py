# =============================================================================
# fmtcheck - clang-format Verification Tool
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""Unit tests for diagnostic rendering."""

from pathlib import Path

import pytest
from returns.result import Failure, Success

from fmtcheck.diagnostics import (
    HEADER_PADDING,
    Diagnostic,
    collect_diagnostics,
    render_diagnostic,
    underline,
)
from fmtcheck.errors import ReportError
from fmtcheck.replacements import FileReport, ReplacementSpan


def _report(path: str, *spans: tuple) -> FileReport:
    return FileReport(path=Path(path), spans=tuple(ReplacementSpan(o, n) for o, n in spans))


class TestUnderline:
    """Test the caret/dash underline row."""

    @pytest.mark.parametrize("line,column,length", [
        ("const x=1;", 8, 1),
        ("const x=1;", 0, 10),
        ("abc", 1, 10),
        ("abc", 3, 2),
        ("", 0, 4),
    ])
    def test_width_matches_line(self, line, column, length):
        marks = underline(line, column, length)
        expected_carets = max(0, min(length, len(line) - column))

        assert len(marks) == len(line)
        assert marks.count("^") == expected_carets
        assert marks.count("-") == len(line) - expected_carets

    def test_single_caret(self):
        assert underline("const x=1;", 8, 1) == "--------^-"

    def test_zero_length_is_all_dashes(self):
        assert underline("let y = 2;", 4, 0) == "----------"

    def test_span_overrunning_line_is_cut(self):
        assert underline("abc", 1, 10) == "-^^"

    def test_span_starting_before_line(self):
        """Column -1 is the previous terminator, which has no cell."""
        assert underline("def", -1, 1) == "---"
        assert underline("def", -1, 2) == "^--"


class TestRenderDiagnostic:
    """Test the two-row display block."""

    def test_block_layout(self):
        diagnostic = Diagnostic(path=Path("a.ts"), line_number=1, line="const x=1;", column=8, length=1)

        header_row, marker_row = render_diagnostic(diagnostic).split("\n")

        assert header_row == "a.ts:1   const x=1;"
        assert marker_row == " " * 9 + "--------^-"

    def test_rows_align(self):
        diagnostic = Diagnostic(path=Path("src/deep/file.ts"), line_number=120,
                                line="  foo( a,b )", column=5, length=2)

        header_row, marker_row = render_diagnostic(diagnostic).split("\n")
        padding = len(diagnostic.header) + HEADER_PADDING

        assert len(marker_row) == padding + len(diagnostic.line)
        assert len(header_row) == len(marker_row)
        assert marker_row[:padding] == " " * padding
        assert header_row[padding:] == diagnostic.line


class TestCollectDiagnostics:
    """Test anchoring a file's spans to its lines."""

    def test_end_to_end_example(self):
        result = collect_diagnostics(_report("a.ts", (8, 1)), "const x=1;\nlet y = 2;\n")

        assert result == Success([
            Diagnostic(path=Path("a.ts"), line_number=1, line="const x=1;", column=8, length=1)
        ])

    def test_spans_across_lines_in_offset_order(self):
        text = "a=1;\nb=2;\nc=3;\n"
        result = collect_diagnostics(_report("x.ts", (1, 0), (2, 0), (11, 0)), text)

        diagnostics = result.unwrap()
        assert [(d.line_number, d.column) for d in diagnostics] == [(1, 1), (1, 2), (3, 1)]
        assert diagnostics[2].line == "c=3;"

    def test_span_on_line_terminator(self):
        text = "abc\ndef"
        result = collect_diagnostics(_report("j.ts", (3, 1), (3, 2)), text)

        joined, wider = result.unwrap()
        assert (joined.line_number, joined.line, joined.column) == (2, "def", -1)
        assert render_diagnostic(joined).split("\n")[1] == " " * 9 + "---"
        assert render_diagnostic(wider).split("\n")[1] == " " * 9 + "^--"

    def test_no_spans(self):
        assert collect_diagnostics(_report("x.ts"), "x\n") == Success([])

    def test_multibyte_text(self):
        text = "s='é';x=1;\n"
        # byte 8 is the second '=', after the two-byte 'é'
        result = collect_diagnostics(_report("u.ts", (8, 1)), text)

        diagnostic = result.unwrap()[0]
        assert diagnostic.column == 7
        assert diagnostic.line[diagnostic.column] == "="
        assert diagnostic.length == 1

    def test_span_outside_text(self):
        result = collect_diagnostics(_report("short.ts", (50, 1)), "x\n")

        assert isinstance(result, Failure)
        error = result.failure()
        assert isinstance(error, ReportError)
        assert error.path == Path("short.ts")
