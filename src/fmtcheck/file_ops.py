# =============================================================================
# fmtcheck - clang-format Verification Tool
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Synchronous file operations with functional error handling.

All functions return IOResult types - no exceptions propagate.
"""

from pathlib import Path
from typing import Union

from returns.io import IOResult, impure_safe

from .errors import FileError, file_not_found, permission_denied


def read_text(
    path: Union[str, Path],
    encoding: str = 'utf-8'
) -> IOResult[str, FileError]:
    """
    Read file with explicit error handling.

    Args:
        path: Path to file to read
        encoding: Text encoding

    Returns:
        IOResult[str, FileError]: File contents or specific error
    """
    path = Path(path)

    @impure_safe
    def _read() -> str:
        return path.read_text(encoding=encoding)

    return _read().alt(_map_read_error(path))


def exists(path: Union[str, Path]) -> IOResult[bool, FileError]:
    """
    Check if a file exists with explicit error handling.

    Args:
        path: Path to check

    Returns:
        IOResult[bool, FileError]: True if the path is a file, False if not, or error
    """
    path = Path(path)

    @impure_safe
    def _exists() -> bool:
        return path.is_file()

    return _exists().alt(_map_stat_error(path))


# Error mapping functions
def _map_read_error(path: Path):
    """Map exceptions to FileError for read operations."""
    def mapper(exc: Exception) -> FileError:
        if isinstance(exc, FileNotFoundError):
            return file_not_found(path)
        elif isinstance(exc, PermissionError):
            return permission_denied(path, "read")
        elif isinstance(exc, UnicodeDecodeError):
            return FileError(
                message=f"Encoding error reading {path}: {exc}",
                path=path,
                operation="read",
                original_error=str(exc)
            )
        else:
            return FileError(
                message=f"Failed to read {path}: {exc}",
                path=path,
                operation="read",
                original_error=str(exc)
            )
    return mapper


def _map_stat_error(path: Path):
    """Map exceptions to FileError for stat operations."""
    def mapper(exc: Exception) -> FileError:
        if isinstance(exc, PermissionError):
            return permission_denied(path, "stat")
        return FileError(
            message=f"Failed to stat {path}: {exc}",
            path=path,
            operation="stat",
            original_error=str(exc)
        )
    return mapper
