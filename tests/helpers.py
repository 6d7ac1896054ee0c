# =============================================================================
# fmtcheck - clang-format Verification Tool
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""Report builders and fake formatters shared by the test suite."""

import json
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from returns.result import Failure, Result, Success

from fmtcheck.errors import FormatterError


def replacements_document(spans: Sequence[Tuple[int, int]] = ()) -> str:
    """Build one clang-format replacement document for the given spans."""
    lines = [
        "<?xml version='1.0'?>",
        "<replacements xml:space='preserve' incomplete_format='false'>",
    ]
    for offset, length in spans:
        lines.append(f"<replacement offset='{offset}' length='{length}'> </replacement>")
    lines.append("</replacements>")
    return "\n".join(lines) + "\n"


class FakeClangFormat:
    """In-process stand-in for ClangFormat that returns canned results.

    Spans are keyed by file name. Every call is recorded so tests can assert
    on the mode and arguments.
    """

    def __init__(self, spans: Optional[Dict[str, List[Tuple[int, int]]]] = None,
                 failure: Optional[FormatterError] = None):
        self.spans = spans or {}
        self.failure = failure
        self.calls: List[Tuple[str, List[str], List[Path]]] = []

    async def output_replacements(self, base_args, files) -> Result[str, FormatterError]:
        self.calls.append(("check", list(base_args), list(files)))
        if self.failure:
            return Failure(self.failure)
        return Success("".join(
            replacements_document(self.spans.get(Path(f).name, [])) for f in files
        ))

    async def fix_in_place(self, base_args, files) -> Result[None, FormatterError]:
        self.calls.append(("fix", list(base_args), list(files)))
        if self.failure:
            return Failure(self.failure)
        return Success(None)

    @property
    def modes(self) -> List[str]:
        return [mode for mode, _, _ in self.calls]


def recorded_calls(script: Path) -> List[List[str]]:
    """Argument lists the fake clang-format script was invoked with."""
    calls = script.parent / "calls.jsonl"
    if not calls.exists():
        return []
    return [json.loads(line) for line in calls.read_text().splitlines()]
