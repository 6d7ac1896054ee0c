# =============================================================================
# fmtcheck - clang-format Verification Tool
# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2025 Michael Gardner, A Bit of Help, Inc.
# See LICENSE file in the project root.
# =============================================================================

"""
Source discovery from a TypeScript project file.

Only the project's root files are formatted: files listed under ``files``
plus those matched by ``include``, minus ``exclude``. Declaration files
(``.d.ts``) carry no executable code and are never formatted.
"""

from __future__ import annotations

import fnmatch
import json
import logging
import re
from pathlib import Path, PurePosixPath

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from returns.io import IOFailure
from returns.result import Failure, Result, Success
from returns.unsafe import unsafe_perform_io

from .errors import ConfigError, FmtcheckError
from .file_ops import read_text

logger = logging.getLogger(__name__)

SOURCE_EXTENSIONS = (".ts", ".tsx")
SCRIPT_EXTENSIONS = (".js", ".jsx")
DECLARATION_SUFFIX = ".d.ts"
DEFAULT_INCLUDE = ["**/*"]
DEFAULT_EXCLUDE = ["node_modules", "bower_components", "jspm_packages"]

# Strings are kept; comments and trailing commas are dropped
_JSONC_TOKEN = re.compile(r'"(?:\\.|[^"\\])*"|//[^\n]*|/\*.*?\*/|,(?=\s*[}\]])', re.DOTALL)
_GLOB_CHARS = re.compile(r"[*?\[]")


class CompilerOptions(BaseModel):
    """The compiler options that affect which files are root files."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    allow_js: bool = Field(False, alias="allowJs")
    out_dir: str | None = Field(None, alias="outDir")


class ProjectConfig(BaseModel):
    """File selection part of a ``tsconfig.json``."""
    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    files: list[str] | None = None
    include: list[str] | None = None
    exclude: list[str] | None = None
    compiler_options: CompilerOptions = Field(default_factory=CompilerOptions, alias="compilerOptions")

    def include_patterns(self) -> list[str]:
        if self.include is not None:
            return self.include
        # An explicit file list turns the default include off
        return [] if self.files is not None else list(DEFAULT_INCLUDE)

    def exclude_patterns(self) -> list[str]:
        if self.exclude is not None:
            return self.exclude
        patterns = list(DEFAULT_EXCLUDE)
        if self.compiler_options.out_dir:
            patterns.append(self.compiler_options.out_dir)
        return patterns

    def extensions(self) -> tuple[str, ...]:
        if self.compiler_options.allow_js:
            return SOURCE_EXTENSIONS + SCRIPT_EXTENSIONS
        return SOURCE_EXTENSIONS


def strip_json_comments(text: str) -> str:
    """Turn ``tsconfig.json`` text (JSON with comments) into plain JSON."""
    return _JSONC_TOKEN.sub(
        lambda match: match.group(0) if match.group(0).startswith('"') else "",
        text,
    )


def load_project(project_file: Path) -> Result[ProjectConfig, FmtcheckError]:
    """Load and validate a project file."""
    content = read_text(project_file)
    if isinstance(content, IOFailure):
        error = unsafe_perform_io(content.failure())
        if error.not_found:
            return Failure(ConfigError(
                message=f"Project file not found: {project_file}",
                config_file=project_file
            ))
        return Failure(error)

    try:
        data = json.loads(strip_json_comments(unsafe_perform_io(content.unwrap())))
        return Success(ProjectConfig.model_validate(data))
    except json.JSONDecodeError as e:
        return Failure(ConfigError(
            message=f"Invalid JSON in {project_file}: {e}",
            config_file=project_file,
            invalid_value=str(e)
        ))
    except ValidationError as e:
        return Failure(ConfigError(
            message=f"Invalid project file {project_file}: {e}",
            config_file=project_file,
            invalid_value=str(e)
        ))


def root_source_files(root: Path, config: ProjectConfig) -> list[Path]:
    """Resolve the root files of a project, excluding declaration files.

    Args:
        root: Directory containing the project file
        config: Parsed project file

    Returns:
        Sorted, de-duplicated paths under ``root``
    """
    extensions = config.extensions()
    excludes = config.exclude_patterns()
    found: set[Path] = set()

    for name in config.files or []:
        found.add(root / name)

    for pattern in config.include_patterns():
        for path in root.glob(_expand_pattern(root, pattern)):
            if not path.is_file() or not path.name.endswith(extensions):
                continue
            relative = PurePosixPath(path.relative_to(root).as_posix())
            if _is_excluded(relative, excludes):
                continue
            found.add(path)

    files = sorted(f for f in found if not f.name.endswith(DECLARATION_SUFFIX))
    logger.debug("Project under %s has %d root files", root, len(files))
    return files


def discover_sources(root: Path, project_file: Path) -> Result[list[Path], FmtcheckError]:
    """Load ``project_file`` and return the project's root source files."""
    return load_project(project_file).map(lambda config: root_source_files(root, config))


def _expand_pattern(root: Path, pattern: str) -> str:
    pattern = _normalize(pattern)
    if pattern in ("", "."):
        return "**/*"
    # A plain directory name means everything below it
    if not _GLOB_CHARS.search(pattern) and (root / pattern).is_dir():
        return f"{pattern}/**/*"
    return pattern


def _is_excluded(relative: PurePosixPath, patterns: list[str]) -> bool:
    candidates = [relative.as_posix()] + [parent.as_posix() for parent in relative.parents
                                          if parent != PurePosixPath(".")]
    for pattern in map(_normalize, patterns):
        bare = pattern.removeprefix("**/")
        for candidate in candidates:
            if fnmatch.fnmatchcase(candidate, pattern) or fnmatch.fnmatchcase(candidate, bare):
                return True
    return False


def _normalize(pattern: str) -> str:
    return pattern.removeprefix("./").rstrip("/")
