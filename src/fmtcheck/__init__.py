# =============================================================================
# fmtcheck - clang-format Verification Tool
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""Check source formatting with clang-format and report line-anchored diagnostics."""

__version__ = "0.1.0"
