# =============================================================================
# fmtcheck - clang-format Verification Tool
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Asynchronous source reads with functional error handling.

Line endings are preserved exactly as stored so that offsets reported by
the formatter line up with the text that is read back.
"""

from pathlib import Path
from typing import Union

import aiofiles
from returns.result import Failure, Success

from .errors import FileEither, FileError, file_not_found, permission_denied


async def buffered_read(
    path: Union[str, Path],
    buffer_size: int = 8192,
    encoding: str = 'utf-8'
) -> str:
    """
    Read a whole file without newline translation.

    Raises:
        FileNotFoundError: If file doesn't exist
        PermissionError: If file isn't readable
        UnicodeDecodeError: If file encoding is invalid
    """
    chunks = []
    async with aiofiles.open(Path(path), mode='r', encoding=encoding, newline='') as f:
        while True:
            chunk = await f.read(buffer_size)
            if not chunk:
                break
            chunks.append(chunk)

    return ''.join(chunks)


async def buffered_read_safe(
    path: Union[str, Path],
    buffer_size: int = 8192,
    encoding: str = 'utf-8'
) -> FileEither:
    """
    Read file with explicit error handling.

    Returns:
        Result[str, FileError]: File contents or specific error
    """
    path = Path(path)

    try:
        content = await buffered_read(path, buffer_size, encoding)
        return Success(content)
    except FileNotFoundError:
        return Failure(file_not_found(path))
    except PermissionError:
        return Failure(permission_denied(path, "read"))
    except UnicodeDecodeError as e:
        return Failure(FileError(
            message=f"Encoding error reading {path}: {e}",
            path=path,
            operation="read",
            original_error=str(e)
        ))
    except OSError as e:
        return Failure(FileError(
            message=f"Failed to read {path}: {e}",
            path=path,
            operation="read",
            original_error=str(e)
        ))
