"""Flat diagnostic representation handed to build pipelines."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from tsbridge.errors import InvalidArgument
from tsbridge.resources import describe_error, error_fields, read_schema, schema_error

_FIELDS: dict[str, str] = {
    "code": "code",
    "fileName": "file_name",
    "message": "message",
    "line": "line",
    "column": "column",
}

# Shared with DiagnosticsReport.from_dict.
REPORT_SCHEMA: dict[str, Any] = read_schema("tsbridge.diagnostics", "report.schema.json")

_DIAGNOSTIC_SCHEMA: dict[str, Any] = {
    "$schema": REPORT_SCHEMA["$schema"],
    **REPORT_SCHEMA["definitions"]["diagnostic"],
}


@dataclass(frozen=True)
class FlatDiagnostic:
    """A diagnostic reduced to code, file and 1-based position."""

    code: int
    file_name: str
    message: str
    line: int  # 1-indexed
    column: int  # 1-indexed

    def __str__(self) -> str:
        return f"{self.file_name}:{self.line}:{self.column}: TS{self.code}: {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Return the serialized (camelCase) form."""
        return {key: getattr(self, attr) for key, attr in _FIELDS.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FlatDiagnostic:
        """Build a diagnostic from its serialized form.

        Raises:
            InvalidArgument: *data* is not a mapping, lacks a field, or has a
                field of the wrong type or below 1.
        """
        if not isinstance(data, Mapping):
            raise InvalidArgument(f"Expected a mapping for a diagnostic, got {type(data).__name__}")
        missing = tuple(key for key in _FIELDS if key not in data)
        if missing:
            raise InvalidArgument(f"Diagnostic is missing fields: {', '.join(missing)}", missing)
        error = schema_error(dict(data), _DIAGNOSTIC_SCHEMA)
        if error is not None:
            raise InvalidArgument(f"Invalid diagnostic: {describe_error(error)}", error_fields(error)) from error
        return cls(**{attr: data[key] for key, attr in _FIELDS.items()})
