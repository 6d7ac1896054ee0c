# =============================================================================
# fmtcheck - clang-format Verification Tool
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""Shared pytest configuration and fixtures for the fmtcheck test suite.

This module provides common fixtures used across all test modules. Fixtures
defined here are automatically available to all tests without explicit
imports.
"""

import json
import stat
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

import pytest

# Add src to path for imports during testing
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))


# ============================================================================
# Source File Fixtures
# ============================================================================

@pytest.fixture
def unformatted_ts(tmp_path: Path) -> Path:
    """A TypeScript file with one missing space around ``=``.

    Line 1 is ``const x=1;`` (10 characters); offset 8 is the ``1``.
    """
    file_path = tmp_path / "a.ts"
    file_path.write_text("const x=1;\nlet y = 2;\n")
    return file_path


@pytest.fixture
def formatted_ts(tmp_path: Path) -> Path:
    """A TypeScript file clang-format has nothing to say about."""
    file_path = tmp_path / "b.ts"
    file_path.write_text("const z = 3;\n")
    return file_path


# ============================================================================
# Fake clang-format Executable
# ============================================================================

_FAKE_SCRIPT = '''#!__PYTHON__
import json
import sys
from pathlib import Path

SPANS = json.loads(__SPANS__)
CALLS = Path(__CALLS__)
EXIT_CODE = __EXIT_CODE__

args = sys.argv[1:]
with CALLS.open("a") as calls:
    calls.write(json.dumps(args) + "\\n")
if EXIT_CODE:
    sys.exit(EXIT_CODE)
if "-output-replacements-xml" in args:
    for name in args[args.index("-output-replacements-xml") + 1:]:
        sys.stdout.write("<?xml version='1.0'?>\\n")
        sys.stdout.write("<replacements xml:space='preserve' incomplete_format='false'>\\n")
        for offset, length in SPANS.get(Path(name).name, []):
            sys.stdout.write("<replacement offset='%d' length='%d'> </replacement>\\n" % (offset, length))
        sys.stdout.write("</replacements>\\n")
'''


@pytest.fixture
def clang_format_script(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing an executable fake clang-format.

    The script prints replacement documents for the files it is given (spans
    keyed by file name) and appends its argument list as JSON to
    ``calls.jsonl`` next to itself.
    """
    def make(spans: Optional[Dict[str, List[Tuple[int, int]]]] = None, exit_code: int = 0) -> Path:
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir(exist_ok=True)
        script = bin_dir / "clang-format"
        source = (_FAKE_SCRIPT
                  .replace("__PYTHON__", sys.executable)
                  .replace("__SPANS__", repr(json.dumps(spans or {})))
                  .replace("__CALLS__", repr(str(bin_dir / "calls.jsonl")))
                  .replace("__EXIT_CODE__", str(exit_code)))
        script.write_text(source)
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return make
