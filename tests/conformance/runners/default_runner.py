"""Conformance runners backed by tsbridge and its pure-Python checker."""

import json

from tsbridge import DiagnosticsReport, create_diagnostics, normalize_path
from tsbridge.checker import DefaultChecker, DiagnosticRecord, SourceUnit
from tests.conformance.runner import ConformanceResult

FILE_NAME = "<test>.ts"


class DefaultRunner:
    """Conformance runner that reports diagnostics in-process."""

    name = "default"

    def __init__(self) -> None:
        self.checker = DefaultChecker()

    def build(self, source: str, errors: list[tuple[int, int, str]]) -> DiagnosticsReport:
        unit = SourceUnit(FILE_NAME, source)
        records = [
            DiagnosticRecord(start=offset, message_text=message, code=code, file=unit)
            for offset, code, message in errors
        ]
        return create_diagnostics([], records, self.checker)

    def check(self, source: str, errors: list[tuple[int, int, str]]) -> ConformanceResult:
        """Flatten the errors and query the resulting report.

        Args:
            source: Source text the offsets refer to
            errors: (offset, code, message) triples reported as semantic errors

        Returns:
            ConformanceResult with the formatted diagnostics
        """
        report = self.build(source, errors)
        return ConformanceResult(
            clean=not report.has_errors(),
            diagnostics=[str(d) for d in report.get_all()],
            unresolved_modules=report.has_unresolved_modules(self.checker),
        )

    def normalize(self, path: str) -> str:
        return normalize_path(path, self.checker)


class SerializedRunner(DefaultRunner):
    """Conformance runner that persists the report as JSON before querying it."""

    name = "serialized"

    def build(self, source: str, errors: list[tuple[int, int, str]]) -> DiagnosticsReport:
        text = json.dumps(super().build(source, errors).to_dict())
        return DiagnosticsReport.from_dict(json.loads(text))
