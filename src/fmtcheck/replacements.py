# =============================================================================
# fmtcheck - clang-format Verification Tool
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Decoder for clang-format's ``-output-replacements-xml`` report.

clang-format writes one XML document per input file, each introduced by an
XML declaration. A batch report is therefore a concatenation of documents in
the order the files were submitted::

    <?xml version='1.0'?>
    <replacements xml:space='preserve' incomplete_format='false'>
    <replacement offset='8' length='0'> </replacement>
    </replacements>

Every document is split off and parsed on its own; the i-th document always
describes the i-th submitted file.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ElementTree
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from returns.result import Failure, Result, Success, safe

from .errors import ReportError, malformed_report

logger = logging.getLogger(__name__)

# Document-start marker separating per-file documents in a batch report
XML_DOCUMENT_MARKER = re.compile(r"<\?xml version=(['\"])1\.0\1\?>\r?\n?")


@dataclass(frozen=True)
class ReplacementSpan:
    """A region of a file the formatter wants changed."""
    offset: int
    length: int
    text: str = ""


@dataclass(frozen=True)
class FileReport:
    """Replacement spans reported for one file, sorted by offset."""
    path: Path
    spans: tuple[ReplacementSpan, ...] = ()

    @property
    def conforms(self) -> bool:
        """True when the formatter requested no change to the file."""
        return not self.spans


def split_documents(output: str) -> list[str]:
    """Split a report into its per-file XML documents.

    Blank segments, such as the empty text before the first declaration,
    are dropped. A report without any declaration is a single document.
    """
    segments = XML_DOCUMENT_MARKER.split(output)
    # re.split also returns the captured quote character between segments
    documents = segments[::2]
    return [document for document in documents if document.strip()]


def decode_report(output: str, paths: Sequence[Path]) -> Result[list[FileReport], ReportError]:
    """Decode a batch report into one FileReport per submitted file.

    Args:
        output: Complete stdout of clang-format
        paths: Files in the order they were passed to clang-format

    Returns:
        Result[list[FileReport], ReportError]: Reports paired positionally
        with ``paths``, or the first decoding error
    """
    documents = split_documents(output)
    if len(documents) != len(paths):
        return Failure(malformed_report(
            f"Expected {len(paths)} replacement documents, found {len(documents)}"
        ))

    reports: list[FileReport] = []
    for index, (path, document) in enumerate(zip(paths, documents)):
        result = parse_document(document, path, index)
        if isinstance(result, Failure):
            return result
        reports.append(result.unwrap())

    return Success(reports)


def parse_document(document: str, path: Path, index: int = 0) -> Result[FileReport, ReportError]:
    """Parse one XML document into a FileReport.

    Args:
        document: A single ``<replacements>`` document
        path: File the document describes
        index: Position of the document in the batch

    Returns:
        Result[FileReport, ReportError]: Decoded report or parse error
    """
    return _parse_document_internal(document, path).alt(_map_parse_error(path, index))


@safe
def _parse_document_internal(document: str, path: Path) -> FileReport:
    root = ElementTree.fromstring(document)
    if root.tag != "replacements":
        raise ValueError(f"unexpected root element <{root.tag}>")

    spans = [_span_from_element(element) for element in root.iter("replacement")]

    offsets = [span.offset for span in spans]
    if offsets != sorted(offsets):
        logger.warning("Replacements for %s are not in offset order; sorting them", path)
        spans.sort(key=lambda span: span.offset)

    return FileReport(path=path, spans=tuple(spans))


def _span_from_element(element: ElementTree.Element) -> ReplacementSpan:
    try:
        offset = int(element.attrib["offset"])
        length = int(element.attrib["length"])
    except KeyError as exc:
        raise ValueError(f"replacement is missing the {exc.args[0]!r} attribute") from exc
    if offset < 0 or length < 0:
        raise ValueError(f"negative replacement span offset={offset} length={length}")
    return ReplacementSpan(offset=offset, length=length, text=element.text or "")


def _map_parse_error(path: Path, index: int):
    """Map parse exceptions to ReportError."""
    def mapper(exc: Exception) -> ReportError:
        if isinstance(exc, ElementTree.ParseError):
            message = f"Malformed replacement report for {path}: {exc}"
        else:
            message = f"Invalid replacement report for {path}: {exc}"
        return malformed_report(message, segment=index, path=path, original_error=str(exc))
    return mapper
