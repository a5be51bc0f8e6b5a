"""File name normalization and classification."""

from __future__ import annotations

import re
from collections.abc import Sequence

from tsbridge.checker.default import DEFAULT_CHECKER, file_extension_is
from tsbridge.checker.protocols import PathClassifier, PatternCompiler
from tsbridge.settings import DEFAULT_SETTINGS, Settings

SOURCE_MAP_EXTENSION = ".map"
TYPINGS_EXTENSION = ".d.ts"


def normalize_slashes(path: str) -> str:
    """Replace backslashes with forward slashes."""
    return path.replace("\\", "/")


def normalize_path(path: str, checker: PathClassifier | None = None) -> str:
    """Normalize *path* into an extensionless, forward-slash module path.

    ``src\\app.js.map`` and ``src/app.ts`` both become ``src/app``.
    """
    checker = checker or DEFAULT_CHECKER
    if is_source_map(path):
        path = path[: -len(SOURCE_MAP_EXTENSION)]
    return checker.remove_file_extension(normalize_slashes(path))


def is_source_map(file_name: str) -> bool:
    return file_extension_is(file_name, SOURCE_MAP_EXTENSION)


def is_typings(file_name: str) -> bool:
    return file_extension_is(file_name, TYPINGS_EXTENSION)


def exclude_pattern_to_regex(
    pattern: str | Sequence[str] | None,
    checker: PatternCompiler | None = None,
    settings: Settings | None = None,
) -> re.Pattern[str] | None:
    """Compile an exclude spec (or list of specs) into a regular expression.

    Returns None for an empty or missing pattern.
    """
    if not pattern:
        return None
    checker = checker or DEFAULT_CHECKER
    settings = settings or DEFAULT_SETTINGS

    source = checker.regular_expression_for_wildcard(pattern, "", "exclude")
    if source is None:
        return None
    flags = 0 if settings.case_sensitive_file_names else re.IGNORECASE
    return re.compile(source, flags)
