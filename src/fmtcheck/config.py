# =============================================================================
# fmtcheck - clang-format Verification Tool
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Runtime settings for fmtcheck.

Values come from defaults and may be overridden through ``FMTCHECK_*``
environment variables (e.g. ``FMTCHECK_CLANG_FORMAT=/opt/llvm/bin/clang-format``).
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the formatter invocation and project discovery."""

    model_config = SettingsConfigDict(env_prefix="FMTCHECK_", extra="ignore")

    clang_format: str = Field("clang-format", description="clang-format executable")
    style_file_name: str = Field(".clang-format", description="Project-local style file")
    language: str = Field("JavaScript", description="Language of the inline style")
    based_on_style: str = Field("Google", description="Preset the inline style is based on")
    column_limit: int = Field(80, gt=0, description="Column limit of the inline style")
    project_file_name: str = Field("tsconfig.json", description="Project file used for discovery")

    def inline_style(self) -> str:
        """Render the inline style descriptor passed with ``-style``."""
        return (
            f"{{Language: {self.language}, "
            f"BasedOnStyle: {self.based_on_style}, "
            f"ColumnLimit: {self.column_limit}}}"
        )
