"""Offset to line/character mapping for source text."""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass


@dataclass(frozen=True)
class LineAndCharacter:
    """A 0-based position in source text."""

    line: int
    character: int


def compute_line_starts(text: str) -> list[int]:
    """Return the offset at which each line of *text* starts.

    ``\\r\\n``, ``\\r``, ``\\n`` and the Unicode line/paragraph separators
    each terminate a line. The result always contains at least ``[0]``.
    """
    starts: list[int] = []
    line_start = 0
    pos = 0
    length = len(text)
    while pos < length:
        ch = text[pos]
        pos += 1
        if ch == "\r":
            if pos < length and text[pos] == "\n":
                pos += 1
            starts.append(line_start)
            line_start = pos
        elif ch in ("\n", "\u2028", "\u2029"):
            starts.append(line_start)
            line_start = pos
    starts.append(line_start)
    return starts


def line_and_character_of_position(line_starts: list[int], position: int) -> LineAndCharacter:
    """Map *position* to a 0-based line/character using precomputed line starts."""
    if position < 0:
        raise ValueError(f"Position {position} cannot be negative")
    line = bisect_right(line_starts, position) - 1
    return LineAndCharacter(line=line, character=position - line_starts[line])
