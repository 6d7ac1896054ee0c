# =============================================================================
# fmtcheck - clang-format Verification Tool
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Format command implementation using the base command architecture.

The command checks (or, with ``fix``, rewrites) a project's sources with
clang-format. ``dry_run`` always wins over ``fix``.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, TextIO

from returns.result import Result, Success
from rich.console import Console

from ..checker import check_format, fix_format
from ..clang_format import ClangFormat, style_args
from ..config import Settings
from ..core.base_command import CommandArgs, CommandProcessor
from ..errors import FmtcheckError
from ..project import discover_sources

DRY_RUN_NOTICE = "format: skipping auto fix since --dry-run was passed"
FIX_ADVICE = "clang-format reported errors... run `fmtcheck fix` to address."


@dataclass
class FormatArgs(CommandArgs):
    """Arguments specific to the format command."""

    root: Path = Path(".")
    project_file: Optional[Path] = None
    files: list[Path] = field(default_factory=list)
    fix: bool = False
    dry_run: bool = False


class FormatCommand(CommandProcessor[bool]):
    """
    Check or fix the formatting of source files.

    1. Resolve the mode (dry-run disables fix)
    2. Use the given files, or the project's root files
    3. Select style arguments once for the batch
    4. Run clang-format in check or fix mode
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        clang_format: Optional[ClangFormat] = None,
        out: Optional[TextIO] = None,
        console: Optional[Console] = None,
    ):
        super().__init__(console)
        self.settings = settings or Settings()
        self.clang_format = clang_format or ClangFormat(self.settings.clang_format)
        self.out = out
        self.fix = False

    def setup_environment(self, args: FormatArgs) -> None:
        super().setup_environment(args)
        self.fix = args.fix and not args.dry_run
        if self.run_log:
            self.run_log.write({"ev": "start", "root": str(args.root), "fix": self.fix})
        if args.fix and args.dry_run:
            self.notice(DRY_RUN_NOTICE)

    async def discover_targets(self, args: FormatArgs) -> Result[list[Path], FmtcheckError]:
        """Use the explicit file list, or the project's root files.

        Project patterns resolve against the directory of the project file.
        """
        if args.files:
            return Success(list(args.files))
        project_file = args.project_file or args.root / self.settings.project_file_name
        return discover_sources(project_file.parent, project_file)

    async def process_targets(self, targets: list[Path], args: FormatArgs) -> Result[bool, FmtcheckError]:
        base_args = style_args(args.root, self.settings)
        if self.run_log:
            self.run_log.write({"ev": "batch", "files": len(targets), "style": base_args})

        if self.fix:
            return await fix_format(targets, base_args, self.clang_format)
        return await check_format(targets, base_args, self.clang_format,
                                  out=self.out, run_log=self.run_log)

    async def finalize(self, result: bool, args: FormatArgs) -> int:
        if self.run_log:
            self.run_log.write({"ev": "done", "fix": self.fix, "ok": result})
        if not result:
            await self.log_info(FIX_ADVICE)
            return 1
        return 0


async def format_main(args: FormatArgs, settings: Optional[Settings] = None) -> Result[int, FmtcheckError]:
    """
    Main entry point for the format command.

    Args:
        args: Parsed command-line arguments
        settings: Optional settings override

    Returns:
        Result[int, FmtcheckError]: Exit code or error
    """
    return await FormatCommand(settings).execute(args)
