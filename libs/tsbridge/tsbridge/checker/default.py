"""Pure-Python checker used when no compiler instance is injected."""

from __future__ import annotations

from collections.abc import Sequence

from tsbridge.checker.codes import CANNOT_FIND_MODULE
from tsbridge.checker.positions import (
    LineAndCharacter,
    compute_line_starts,
    line_and_character_of_position,
)
from tsbridge.checker.units import SourceUnit
from tsbridge.checker.wildcard import WildcardUsage, regular_expression_for_wildcard

# Order matters: declaration suffixes must be tried before plain ones.
EXTENSIONS_TO_REMOVE: tuple[str, ...] = (
    ".d.ts",
    ".d.mts",
    ".d.cts",
    ".mjs",
    ".mts",
    ".cjs",
    ".cts",
    ".ts",
    ".js",
    ".tsx",
    ".jsx",
    ".json",
)


def file_extension_is(path: str, extension: str) -> bool:
    """Return True if *path* ends with *extension* and has a name before it."""
    return len(path) > len(extension) and path.endswith(extension)


class DefaultChecker:
    """Implements :class:`~tsbridge.checker.protocols.Checker` without a compiler."""

    cannot_find_module_code: int = CANNOT_FIND_MODULE.code

    def __init__(self, extensions: Sequence[str] = EXTENSIONS_TO_REMOVE) -> None:
        self._extensions = tuple(extensions)

    def line_and_character_of_position(self, unit: SourceUnit, position: int) -> LineAndCharacter:
        if position > len(unit.text):
            raise ValueError(
                f"Position {position} is past the end of {unit.file_name} ({len(unit.text)} characters)"
            )
        return line_and_character_of_position(compute_line_starts(unit.text), position)

    def remove_file_extension(self, path: str) -> str:
        for extension in self._extensions:
            if file_extension_is(path, extension):
                return path[: -len(extension)]
        return path

    def regular_expression_for_wildcard(
        self,
        specs: str | Sequence[str] | None,
        base_path: str,
        usage: WildcardUsage,
    ) -> str | None:
        return regular_expression_for_wildcard(specs, base_path, usage)


DEFAULT_CHECKER = DefaultChecker()
