"""Capabilities tsbridge needs from a compiler, as structural interfaces.

Any object with the right methods can stand in for the checker; tests pass
small fakes instead of a full compiler instance.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from tsbridge.checker.positions import LineAndCharacter
from tsbridge.checker.units import SourceUnit
from tsbridge.checker.wildcard import WildcardUsage


class PositionResolver(Protocol):
    """Maps character offsets inside a source unit to 0-based positions."""

    def line_and_character_of_position(self, unit: SourceUnit, position: int) -> LineAndCharacter:
        ...


class PathClassifier(Protocol):
    """Knows which file extensions the compiler treats as source files."""

    def remove_file_extension(self, path: str) -> str:
        """Strip the first recognized source extension from *path*."""
        ...


class PatternCompiler(Protocol):
    """Turns wildcard file specs into regular expression sources."""

    def regular_expression_for_wildcard(
        self,
        specs: str | Sequence[str] | None,
        base_path: str,
        usage: WildcardUsage,
    ) -> str | None:
        ...


class Checker(PositionResolver, PathClassifier, PatternCompiler, Protocol):
    """Everything tsbridge consumes from the compiler."""

    cannot_find_module_code: int
