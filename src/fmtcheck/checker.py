# =============================================================================
# fmtcheck - clang-format Verification Tool
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Batch check and fix operations.

``check_format`` runs clang-format once over a batch, decodes the combined
report, and prints a diagnostic for every replacement span. ``fix_format``
rewrites the batch in place. Any failure aborts the batch.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from returns.result import Failure, Result, Success

from .async_file_io import buffered_read_safe
from .clang_format import ClangFormat
from .diagnostics import collect_diagnostics, render_diagnostic
from .errors import ConformsEither, FmtcheckError
from .logging_jsonl import JsonlLogger
from .replacements import FileReport, decode_report

logger = logging.getLogger(__name__)


async def check_format(
    files: Sequence[Path],
    base_args: Sequence[str],
    clang_format: ClangFormat,
    out: TextIO | None = None,
    run_log: JsonlLogger | None = None,
) -> ConformsEither:
    """Check that ``files`` are formatted.

    Args:
        files: Files to check; reports are paired with files by position
        base_args: Style arguments
        clang_format: Formatter runner
        out: Stream for diagnostics (stdout by default)
        run_log: Optional structured run log

    Returns:
        Result[bool, FmtcheckError]: True when no file needs changes
    """
    out = out or sys.stdout

    output = await clang_format.output_replacements(base_args, files)
    if isinstance(output, Failure):
        return output

    decoded = decode_report(output.unwrap(), files)
    if isinstance(decoded, Failure):
        return decoded

    conforms = True
    for report in decoded.unwrap():
        if run_log:
            run_log.write({"ev": "report", "path": str(report.path), "spans": len(report.spans)})
        if report.conforms:
            continue

        conforms = False
        printed = await _print_report(report, out)
        if isinstance(printed, Failure):
            return printed

    return Success(conforms)


async def _print_report(report: FileReport, out: TextIO) -> Result[None, FmtcheckError]:
    # Read the file as submitted, not anything the formatter produced
    text = await buffered_read_safe(report.path)
    if isinstance(text, Failure):
        return text

    diagnostics = collect_diagnostics(report, text.unwrap())
    if isinstance(diagnostics, Failure):
        return diagnostics

    logger.debug("%s: %d replacement(s)", report.path, len(report.spans))
    for diagnostic in diagnostics.unwrap():
        print(render_diagnostic(diagnostic), file=out)

    return Success(None)


async def fix_format(
    files: Sequence[Path],
    base_args: Sequence[str],
    clang_format: ClangFormat,
) -> Result[bool, FmtcheckError]:
    """Rewrite ``files`` in place; no diagnostics are produced."""
    result = await clang_format.fix_in_place(base_args, files)
    if isinstance(result, Failure):
        return result
    return Success(True)
