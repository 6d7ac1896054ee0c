# =============================================================================
# fmtcheck - clang-format Verification Tool
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""Logging setup and initialization for fmtcheck."""

import logging
import sys
from pathlib import Path
from typing import Optional

from .logging_jsonl import JsonlLogger

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

_handler: Optional[logging.Handler] = None


def setup_logging(verbose: bool = False, log_path: Optional[Path] = None) -> Optional[JsonlLogger]:
    """
    Configure the package loggers and the optional JSONL run log.

    Log records go to stderr; stdout is reserved for diagnostics.

    Args:
        verbose: Log at DEBUG instead of WARNING
        log_path: Path for the JSONL run log (None to disable)

    Returns:
        The run log, already truncated, or None
    """
    global _handler
    package_logger = logging.getLogger("fmtcheck")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    # Rebind to the current stderr on every run
    if _handler is not None:
        package_logger.removeHandler(_handler)
    _handler = logging.StreamHandler(sys.stderr)
    _handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(_handler)

    if log_path is None:
        return None

    run_log = JsonlLogger(log_path)
    run_log.start_fresh()
    return run_log
