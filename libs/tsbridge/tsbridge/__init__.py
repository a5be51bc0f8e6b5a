"""tsbridge: adapters over a TypeScript-style compiler API (Layer 2 — depends on checker, diagnostics)."""

from tsbridge.diagnostics import (
    DiagnosticsReport,
    FlatDiagnostic,
    create_diagnostics,
    flatten_diagnostics,
    has_errors,
)
from tsbridge.errors import ConfigError, InvalidArgument, ParseError, TsBridgeError
from tsbridge.paths import exclude_pattern_to_regex, is_source_map, is_typings, normalize_path
from tsbridge.references import ReferenceSet, get_references
from tsbridge.settings import DEFAULT_SETTINGS, Settings, load_settings
from tsbridge.sourcemap import prepare_source_map

__all__ = [
    "normalize_path",
    "prepare_source_map",
    "get_references",
    "ReferenceSet",
    "create_diagnostics",
    "flatten_diagnostics",
    "has_errors",
    "DiagnosticsReport",
    "FlatDiagnostic",
    "is_source_map",
    "is_typings",
    "exclude_pattern_to_regex",
    "Settings",
    "DEFAULT_SETTINGS",
    "load_settings",
    "TsBridgeError",
    "ParseError",
    "InvalidArgument",
    "ConfigError",
]
