# =============================================================================
# fmtcheck - clang-format Verification Tool
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""fmtcheck test suite.

Test Organization:
    - unit/: Fast, isolated tests using in-process fakes
    - integration/: CLI runs against a fake clang-format executable
    - conftest.py: Shared pytest fixtures
    - helpers.py: Report builders and the in-process formatter fake

Running Tests:
    # All tests
    pytest

    # Unit tests only
    pytest tests/unit/
"""
