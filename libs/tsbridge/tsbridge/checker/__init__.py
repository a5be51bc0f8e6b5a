"""Checker-side structures and capabilities (Layer 0 — depends only on errors and bundled resources)."""

from tsbridge.checker.category import DiagnosticCategory
from tsbridge.checker.codes import CANNOT_FIND_MODULE, REGISTRY, DiagnosticCode, load_registry
from tsbridge.checker.default import DEFAULT_CHECKER, DefaultChecker, file_extension_is
from tsbridge.checker.positions import LineAndCharacter, compute_line_starts
from tsbridge.checker.protocols import Checker, PathClassifier, PatternCompiler, PositionResolver
from tsbridge.checker.units import (
    DiagnosticMessageChain,
    DiagnosticRecord,
    FileReference,
    ResolvedModule,
    SourceUnit,
)

__all__ = [
    "DiagnosticCategory",
    "DiagnosticCode",
    "CANNOT_FIND_MODULE",
    "REGISTRY",
    "load_registry",
    "Checker",
    "PositionResolver",
    "PathClassifier",
    "PatternCompiler",
    "DefaultChecker",
    "DEFAULT_CHECKER",
    "file_extension_is",
    "LineAndCharacter",
    "compute_line_starts",
    "SourceUnit",
    "ResolvedModule",
    "FileReference",
    "DiagnosticMessageChain",
    "DiagnosticRecord",
]
