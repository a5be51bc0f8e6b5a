"""Syntactic and semantic diagnostics for one compilation, with queries."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from tsbridge.checker.codes import CANNOT_FIND_MODULE
from tsbridge.checker.protocols import Checker, PositionResolver
from tsbridge.checker.units import DiagnosticRecord
from tsbridge.diagnostics.diagnostic import REPORT_SCHEMA, FlatDiagnostic
from tsbridge.diagnostics.flatten import flatten_diagnostics
from tsbridge.errors import InvalidArgument
from tsbridge.resources import describe_error, error_fields, schema_error
from tsbridge.settings import Settings

_REPORT_FIELDS: tuple[str, ...] = ("syntacticErrors", "semanticErrors")


@dataclass(frozen=True)
class DiagnosticsReport:
    """Flattened diagnostics of a compilation, split by phase."""

    syntactic_errors: tuple[FlatDiagnostic, ...] = ()
    semantic_errors: tuple[FlatDiagnostic, ...] = ()

    def has_errors(self) -> bool:
        """Return True if either phase reported anything."""
        return bool(self.semantic_errors) or bool(self.syntactic_errors)

    def has_unresolved_modules(self, checker: Checker | None = None) -> bool:
        """Return True if a semantic diagnostic reports a module that cannot be found."""
        code = checker.cannot_find_module_code if checker is not None else CANNOT_FIND_MODULE.code
        return any(d.code == code for d in self.semantic_errors)

    def get_all(self) -> list[FlatDiagnostic]:
        """Return syntactic then semantic diagnostics as one list."""
        return list(self.syntactic_errors) + list(self.semantic_errors)

    def format_all(self) -> str:
        """Format all diagnostics as a newline-separated string."""
        return "\n".join(str(d) for d in self.get_all())

    def to_dict(self) -> dict[str, Any]:
        """Return the serialized form."""
        return {
            "syntacticErrors": [d.to_dict() for d in self.syntactic_errors],
            "semanticErrors": [d.to_dict() for d in self.semantic_errors],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> DiagnosticsReport:
        """Rebuild a report from its serialized form.

        Raises:
            InvalidArgument: *data* is not a mapping, lacks one of the two
                diagnostic lists, a list is not an array, or a diagnostic
                is malformed.
        """
        if not isinstance(data, Mapping):
            raise InvalidArgument(f"Expected a mapping for a diagnostics report, got {type(data).__name__}")
        missing = tuple(key for key in _REPORT_FIELDS if key not in data)
        if missing:
            raise InvalidArgument(f"Diagnostics report is missing fields: {', '.join(missing)}", missing)
        error = schema_error(dict(data), REPORT_SCHEMA)
        if error is not None:
            raise InvalidArgument(
                f"Invalid diagnostics report: {describe_error(error)}", error_fields(error)
            ) from error
        return cls(
            syntactic_errors=tuple(FlatDiagnostic.from_dict(d) for d in data["syntacticErrors"]),
            semantic_errors=tuple(FlatDiagnostic.from_dict(d) for d in data["semanticErrors"]),
        )


def create_diagnostics(
    syntactic: Iterable[DiagnosticRecord],
    semantic: Iterable[DiagnosticRecord],
    checker: PositionResolver | None = None,
    settings: Settings | None = None,
) -> DiagnosticsReport:
    """Flatten both phases of checker diagnostics into a report."""
    return DiagnosticsReport(
        syntactic_errors=tuple(flatten_diagnostics(syntactic, checker, settings)),
        semantic_errors=tuple(flatten_diagnostics(semantic, checker, settings)),
    )


def has_errors(report: DiagnosticsReport | None) -> bool:
    """Return True if *report* has diagnostics; a missing report counts as failed."""
    if report is None:
        return True
    return report.has_errors()
