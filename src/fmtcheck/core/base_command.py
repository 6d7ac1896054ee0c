# =============================================================================
# fmtcheck - clang-format Verification Tool
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Base command processor implementing the template method pattern.

This module provides the abstract base class for CLI commands,
defining the common execution flow and shared infrastructure.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, Optional, TypeVar

from returns.result import Failure, Result, Success
from rich.console import Console

from ..errors import FmtcheckError
from ..logging_jsonl import JsonlLogger
from ..logging_setup import setup_logging

T = TypeVar('T')  # Result type for command

logger = logging.getLogger(__name__)


@dataclass
class CommandArgs:
    """Base arguments shared by all commands."""

    verbose: bool = False
    log_path: Optional[Path] = None


class CommandProcessor(ABC, Generic[T]):
    """
    Base processor for CLI commands.

    Implements the template method pattern to define common execution flow:
    1. Setup environment (logging)
    2. Discover targets (files)
    3. Process targets (command-specific)
    4. Finalize (reporting, exit code)
    5. Cleanup
    """

    def __init__(self, console: Optional[Console] = None):
        # Notices go to stderr; stdout carries diagnostics only
        self.console = console or Console(stderr=True, highlight=False)
        self.run_log: Optional[JsonlLogger] = None

    async def execute(self, args: CommandArgs) -> Result[int, FmtcheckError]:
        """
        Template method defining the common execution flow.

        Args:
            args: Command-specific arguments

        Returns:
            Result[int, FmtcheckError]: Exit code on success or error
        """
        try:
            self.setup_environment(args)

            targets = await self.discover_targets(args)
            if isinstance(targets, Failure):
                return targets

            files = targets.unwrap()
            if not files:
                await self.log_info("No source files found to process")
                return Success(0)

            result = await self.process_targets(files, args)
            if isinstance(result, Failure):
                return result

            return Success(await self.finalize(result.unwrap(), args))

        except Exception as exc:
            logger.debug("Command failed", exc_info=True)
            return Failure(FmtcheckError(message=f"Unexpected error: {exc}"))

        finally:
            self.cleanup()

    def setup_environment(self, args: CommandArgs) -> None:
        """Configure logging and open the run log if requested."""
        self.run_log = setup_logging(verbose=args.verbose, log_path=args.log_path)

    @abstractmethod
    async def discover_targets(self, args: CommandArgs) -> Result[list[Path], FmtcheckError]:
        """
        Discover the files to process.

        Args:
            args: Command arguments

        Returns:
            Result[list[Path], FmtcheckError]: Files to process or error
        """

    @abstractmethod
    async def process_targets(self, targets: list[Path], args: CommandArgs) -> Result[T, FmtcheckError]:
        """
        Process discovered files.

        This is the main command-specific logic.
        """

    @abstractmethod
    async def finalize(self, result: T, args: CommandArgs) -> int:
        """Report the result and map it to an exit code."""

    def cleanup(self) -> None:
        """Clean up resources."""
        if self.run_log:
            self.run_log.close()

    # Helper methods for subclasses

    def notice(self, message: str) -> None:
        """Print a notice for the user and record it in the run log."""
        self.console.print(message, markup=False, soft_wrap=True)
        if self.run_log:
            self.run_log.write({"ev": "notice", "message": message})

    async def log_info(self, message: str) -> None:
        """Notice helper for the async command steps."""
        self.notice(message)
