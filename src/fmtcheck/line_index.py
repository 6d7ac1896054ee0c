# =============================================================================
# fmtcheck - clang-format Verification Tool
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Offset index mapping absolute text offsets to line/column positions.

The index splits a file's text on ``\\n`` and walks a single cursor over the
lines. Each line's length excludes its terminator, but the terminator still
consumes one unit when the cursor advances to the following line.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class LinePosition:
    """Position of an offset within a text.

    Attributes:
        line_number: 1-based line number
        column: 0-based column within the line; -1 for the terminator of
            the previous line
        line_start: Offset of the first character of the line
    """
    line_number: int
    column: int
    line_start: int


class LineIndex:
    """Line lookup for one file's text, built once and consumed once."""

    def __init__(self, text: str):
        self.lines = text.split("\n")
        self.text_length = len(text)
        self._encoded = text.encode("utf-8")
        self._ascii = len(self._encoded) == self.text_length

    def line(self, line_number: int) -> str:
        """Return the text of a 1-based line, without its terminator."""
        return self.lines[line_number - 1]

    def char_offset(self, byte_offset: int) -> int:
        """Convert a UTF-8 byte offset into a character offset.

        clang-format reports offsets in bytes; the index walks characters.

        Raises:
            ValueError: If the offset lies outside the encoded text
        """
        if byte_offset < 0 or byte_offset > len(self._encoded):
            raise ValueError(
                f"offset {byte_offset} is outside the text ({len(self._encoded)} bytes)"
            )
        if self._ascii:
            return byte_offset
        return len(self._encoded[:byte_offset].decode("utf-8", errors="ignore"))

    def locate(self, offsets: Iterable[int]) -> list[LinePosition]:
        """Resolve ascending character offsets to line positions.

        An offset equal to ``line_start + len(line)`` belongs to the next line.
        When that offset is the terminator itself, it is reported at column -1
        of the next line. The last line absorbs offsets up to the end of text.

        Args:
            offsets: Character offsets in non-decreasing order

        Returns:
            One LinePosition per offset, in input order

        Raises:
            ValueError: If offsets are out of order or past the end of the text
        """
        positions: list[LinePosition] = []
        last_line = len(self.lines) - 1
        line_count = 0
        prev_char_count = 0
        previous = 0

        for offset in offsets:
            if offset < previous:
                raise ValueError(
                    f"offsets must be sorted ascending: {offset} follows {previous}"
                )
            if offset > self.text_length:
                raise ValueError(
                    f"offset {offset} is past the end of the text ({self.text_length} characters)"
                )
            previous = offset

            while (line_count < last_line
                   and offset >= prev_char_count + len(self.lines[line_count])):
                prev_char_count += len(self.lines[line_count]) + 1
                line_count += 1

            positions.append(LinePosition(
                line_number=line_count + 1,
                column=offset - prev_char_count,
                line_start=prev_char_count,
            ))

        return positions
