# =============================================================================
# fmtcheck - clang-format Verification Tool
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
clang-format process invocation.

The formatter runs in one of two modes:

- check: ``-output-replacements-xml`` writes a replacement report to stdout,
  which is drained completely before anything else happens
- fix: ``-i`` rewrites the files in place with all streams inherited

The command line is always ``[executable, *style_args, mode_flag, *files]``.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from returns.result import Failure, Result, Success
from returns.unsafe import unsafe_perform_io

from .config import Settings
from .errors import FormatterError
from .file_ops import exists

logger = logging.getLogger(__name__)

STYLE_FILE_ARGS = ["-style=file"]
REPLACEMENTS_XML_FLAG = "-output-replacements-xml"
IN_PLACE_FLAG = "-i"


def style_args(root: Path, settings: Settings) -> list[str]:
    """Select the style arguments for a batch.

    A project-local style file wins; otherwise the inline descriptor built
    from the settings is passed.
    """
    style_file = root / settings.style_file_name
    if unsafe_perform_io(exists(style_file).value_or(False)):
        logger.debug("Using style file %s", style_file)
        return list(STYLE_FILE_ARGS)
    return ["-style", settings.inline_style()]


class ClangFormat:
    """Runs the clang-format executable."""

    def __init__(self, executable: str = "clang-format"):
        self.executable = executable

    def build_command(self, base_args: Sequence[str], mode_flag: str,
                      files: Sequence[Path]) -> list[str]:
        return [self.executable, *base_args, mode_flag, *(str(f) for f in files)]

    async def output_replacements(self, base_args: Sequence[str],
                                  files: Sequence[Path]) -> Result[str, FormatterError]:
        """Run in check mode and return the complete replacement report.

        Args:
            base_args: Style arguments
            files: Files to check, in report order

        Returns:
            Result[str, FormatterError]: clang-format stdout or process error
        """
        command = self.build_command(base_args, REPLACEMENTS_XML_FLAG, files)
        logger.debug("Running %s", " ".join(command))

        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            return Failure(_start_failed(command, e))

        stdout, _ = await process.communicate()

        if process.returncode != 0:
            return Failure(FormatterError(
                message=f"{self.executable} exited with code {process.returncode}",
                operation="check",
                command=" ".join(command),
                exit_code=process.returncode
            ))

        return Success(stdout.decode("utf-8", errors="replace"))

    async def fix_in_place(self, base_args: Sequence[str],
                           files: Sequence[Path]) -> Result[None, FormatterError]:
        """Run in fix mode, rewriting ``files`` in place."""
        command = self.build_command(base_args, IN_PLACE_FLAG, files)
        logger.debug("Running %s", " ".join(command))

        try:
            process = await asyncio.create_subprocess_exec(*command)
        except OSError as e:
            return Failure(_start_failed(command, e))

        returncode = await process.wait()
        if returncode != 0:
            return Failure(FormatterError(
                message=f"{self.executable} exited with code {returncode}",
                operation="fix",
                command=" ".join(command),
                exit_code=returncode
            ))

        return Success(None)


def _start_failed(command: list[str], exc: OSError) -> FormatterError:
    return FormatterError(
        message=f"Failed to start {command[0]}: {exc}",
        operation="start",
        command=" ".join(command)
    )
