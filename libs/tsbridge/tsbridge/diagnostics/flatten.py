"""Conversion of checker diagnostics into flat records."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from tsbridge.checker.default import DEFAULT_CHECKER
from tsbridge.checker.protocols import PositionResolver
from tsbridge.checker.units import DiagnosticRecord
from tsbridge.diagnostics.diagnostic import FlatDiagnostic
from tsbridge.diagnostics.message import flatten_message_text
from tsbridge.settings import DEFAULT_SETTINGS, Settings

logger = logging.getLogger(__name__)


def flatten_diagnostics(
    diagnostics: Iterable[DiagnosticRecord],
    checker: PositionResolver | None = None,
    settings: Settings | None = None,
) -> list[FlatDiagnostic]:
    """Flatten checker diagnostics, preserving their order.

    Diagnostics that are not attached to a file (global or configuration
    diagnostics) are dropped.
    """
    checker = checker or DEFAULT_CHECKER
    settings = settings or DEFAULT_SETTINGS

    result: list[FlatDiagnostic] = []
    for diagnostic in diagnostics:
        if diagnostic.file is None:
            logger.debug(f"Dropping diagnostic TS{diagnostic.code} with no associated file")
            continue

        pos = checker.line_and_character_of_position(diagnostic.file, diagnostic.start)
        result.append(
            FlatDiagnostic(
                code=diagnostic.code,
                file_name=diagnostic.file.file_name,
                message=flatten_message_text(diagnostic.message_text, settings.new_line),
                line=pos.line + 1,
                column=pos.character + 1,
            )
        )
    return result
