"""Read-only structures produced by the checker.

These mirror the parts of a compiler's source-file and diagnostic objects
that tsbridge reads. They are owned by the checker; tsbridge never mutates
them.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from tsbridge.checker.category import DiagnosticCategory


@dataclass(frozen=True)
class ResolvedModule:
    """Result of resolving one module specifier."""

    resolved_file_name: str | None = None
    is_external_library_import: bool = False
    extension: str | None = None


@dataclass(frozen=True)
class FileReference:
    """A ``/// <reference path="..." />`` directive."""

    file_name: str
    pos: int = 0
    end: int = 0


@dataclass(frozen=True)
class SourceUnit:
    """A parsed source file: its name, text and resolution metadata."""

    file_name: str
    text: str = ""
    resolved_modules: Mapping[str, ResolvedModule | None] | None = None
    referenced_files: Sequence[FileReference] | None = None


@dataclass(frozen=True)
class DiagnosticMessageChain:
    """A message with nested follow-up messages (elaborations)."""

    message_text: str
    code: int = 0
    category: DiagnosticCategory = DiagnosticCategory.ERROR
    next: tuple[DiagnosticMessageChain, ...] = ()


@dataclass(frozen=True)
class DiagnosticRecord:
    """A diagnostic as the checker reports it.

    ``start`` is a 0-based character offset into ``file.text``. Global
    diagnostics (configuration problems, missing inputs) carry no file.
    """

    start: int
    message_text: str | DiagnosticMessageChain
    code: int
    file: SourceUnit | None = None
    length: int = 0
    category: DiagnosticCategory = DiagnosticCategory.ERROR
