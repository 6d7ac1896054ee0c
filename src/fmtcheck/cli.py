# =============================================================================
# fmtcheck - clang-format Verification Tool
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Command-line interface for fmtcheck.

Exit codes:
    0  all files conform (check) or were rewritten (fix)
    1  clang-format reported formatting errors
    2  configuration error
    3  runtime error (formatter process, replacement report, file read)
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import List, Optional

import pydantic
import typer
from typing_extensions import Annotated

from returns.result import Failure, Result

from . import __version__
from .commands.format_command import FormatArgs, FormatCommand
from .config import Settings
from .core.base_command import CommandProcessor
from .errors import ConfigError, FmtcheckError

EXIT_CONFIG_ERROR = 2
EXIT_RUNTIME_ERROR = 3

app = typer.Typer(
    name="fmtcheck",
    help="Check source formatting with clang-format",
    add_completion=False,
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
    pretty_exceptions_enable=False,
)

FilesArgument = Annotated[Optional[List[Path]], typer.Argument(help="Files to process (default: the project's root files)")]
RootOption = Annotated[Path, typer.Option("--root", help="Project root directory")]
ProjectOption = Annotated[Optional[Path], typer.Option("--project", help="Project file (default: <root>/tsconfig.json)")]
LogPathOption = Annotated[Optional[Path], typer.Option("--log-path", help="Write a JSONL run log to this path")]
VerboseOption = Annotated[bool, typer.Option("--verbose", help="Enable debug logging on stderr")]


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"fmtcheck {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[Optional[bool], typer.Option("--version", "-V", callback=version_callback, is_eager=True, help="Show version and exit")] = None
) -> None:
    """Check source formatting with clang-format."""


def _run_command(command_processor: CommandProcessor, args: FormatArgs) -> Result[int, FmtcheckError]:
    """Run an async command processor to completion."""
    return asyncio.run(command_processor.execute(args))


def _handle_command_result(result: Result[int, FmtcheckError]) -> int:
    """Map a command result to an exit code, reporting any error."""
    if isinstance(result, Failure):
        error = result.failure()
        if isinstance(error, ConfigError):
            typer.echo(f"Configuration error: {error.message}", err=True)
            return EXIT_CONFIG_ERROR
        typer.echo(f"Error: {error.message}", err=True)
        return EXIT_RUNTIME_ERROR

    return result.unwrap()


def _load_settings() -> Settings:
    try:
        return Settings()
    except pydantic.ValidationError as e:
        typer.echo(f"Configuration error: {e}", err=True)
        raise typer.Exit(EXIT_CONFIG_ERROR)


def _format(args: FormatArgs) -> None:
    processor = FormatCommand(_load_settings())
    exit_code = _handle_command_result(_run_command(processor, args))
    if exit_code != 0:
        raise typer.Exit(exit_code)


@app.command(name="check")
def check_command(
    files: FilesArgument = None,
    root: RootOption = Path("."),
    project: ProjectOption = None,
    log_path: LogPathOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Report formatting errors without changing any file."""
    _format(FormatArgs(
        root=root,
        project_file=project,
        files=files or [],
        fix=False,
        verbose=verbose,
        log_path=log_path,
    ))


@app.command(name="fix")
def fix_command(
    files: FilesArgument = None,
    root: RootOption = Path("."),
    project: ProjectOption = None,
    dry_run: Annotated[bool, typer.Option("--dry-run", help="Only report formatting errors; do not rewrite files")] = False,
    log_path: LogPathOption = None,
    verbose: VerboseOption = False,
) -> None:
    """Rewrite files in place with clang-format."""
    _format(FormatArgs(
        root=root,
        project_file=project,
        files=files or [],
        fix=True,
        dry_run=dry_run,
        verbose=verbose,
        log_path=log_path,
    ))


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
