# =============================================================================
# fmtcheck - clang-format Verification Tool
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Error types for functional error handling using Result.

This module defines all error types used throughout fmtcheck.
Operations return Result[Value, Error] types and every failure is fatal
for the batch it occurs in.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

from returns.result import Result


# =============================================================================
# Base Error Type
# =============================================================================

@dataclass(frozen=True)
class FmtcheckError:
    """Base error type for all fmtcheck errors."""
    message: str

    def __str__(self) -> str:
        return self.message


# =============================================================================
# File Operation Errors
# =============================================================================

@dataclass(frozen=True)
class FileError(FmtcheckError):
    """File operation error."""
    path: Path
    operation: Literal["read", "stat"]
    original_error: str | None = None
    permission_error: bool = False
    not_found: bool = False


# =============================================================================
# Replacement Report Errors
# =============================================================================

@dataclass(frozen=True)
class ReportError(FmtcheckError):
    """The formatter's replacement report could not be decoded or mapped."""
    path: Path | None = None
    segment: int | None = None
    original_error: str | None = None


# =============================================================================
# Formatter Process Errors
# =============================================================================

@dataclass(frozen=True)
class FormatterError(FmtcheckError):
    """The external formatter could not be started or exited abnormally."""
    operation: Literal["start", "check", "fix"]
    command: str = ""
    exit_code: int | None = None


# =============================================================================
# Configuration Errors
# =============================================================================

@dataclass(frozen=True)
class ConfigError(FmtcheckError):
    """Configuration error."""
    config_file: Path | None = None
    key: str | None = None
    invalid_value: str | None = None


# =============================================================================
# Type Aliases for Common Result Types
# =============================================================================

FileEither = Result[str, FileError]
ConformsEither = Result[bool, FmtcheckError]


# =============================================================================
# Error Helpers
# =============================================================================

def file_not_found(path: Path, operation: Literal["read", "stat"] = "read") -> FileError:
    """Create a file not found error."""
    return FileError(
        message=f"File not found: {path}",
        path=path,
        operation=operation,
        not_found=True
    )


def permission_denied(path: Path, operation: Literal["read", "stat"]) -> FileError:
    """Create a permission denied error."""
    return FileError(
        message=f"Permission denied: {operation} {path}",
        path=path,
        operation=operation,
        permission_error=True
    )


def malformed_report(message: str, segment: int | None = None,
                     path: Path | None = None, original_error: str | None = None) -> ReportError:
    """Create a replacement report error."""
    return ReportError(
        message=message,
        path=path,
        segment=segment,
        original_error=original_error
    )
