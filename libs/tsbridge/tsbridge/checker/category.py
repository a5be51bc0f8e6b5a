"""Diagnostic categories reported by the checker."""

from __future__ import annotations

from enum import Enum


class DiagnosticCategory(Enum):
    """Category of a checker diagnostic."""

    WARNING = "warning"
    ERROR = "error"
    SUGGESTION = "suggestion"
    MESSAGE = "message"
