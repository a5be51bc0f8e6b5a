"""Diagnostics subpackage (Layer 1 — depends on checker)."""

from tsbridge.diagnostics.diagnostic import FlatDiagnostic
from tsbridge.diagnostics.flatten import flatten_diagnostics
from tsbridge.diagnostics.message import flatten_message_text
from tsbridge.diagnostics.report import DiagnosticsReport, create_diagnostics, has_errors

__all__ = [
    "FlatDiagnostic",
    "DiagnosticsReport",
    "flatten_diagnostics",
    "flatten_message_text",
    "create_diagnostics",
    "has_errors",
]
