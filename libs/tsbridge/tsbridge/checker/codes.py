"""Registry of well-known checker diagnostic codes.

The registry ships as ``codes.yaml`` next to this module and is validated
against ``codes.schema.json`` when loaded.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

from tsbridge.checker.category import DiagnosticCategory
from tsbridge.errors import ConfigError
from tsbridge.resources import load_validated_yaml, read_schema, read_text

_PACKAGE = "tsbridge.checker"


@dataclass(frozen=True)
class DiagnosticCode:
    """A diagnostic the checker can report, identified by its numeric code."""

    key: str
    code: int
    category: DiagnosticCategory
    message: str

    def format(self, *args: object) -> str:
        """Substitute ``{0}``, ``{1}``... placeholders in the message template."""
        text = self.message
        for index, arg in enumerate(args):
            text = text.replace("{" + str(index) + "}", str(arg))
        return text


def load_registry(path: str | Path | None = None) -> dict[str, DiagnosticCode]:
    """Load a code registry, the bundled one when *path* is None.

    Raises:
        ConfigError: The registry is unreadable, malformed or assigns a code twice.
    """
    if path is None:
        source = "codes.yaml"
        text = read_text(_PACKAGE, source)
    else:
        source = str(path)
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Cannot read code registry {source}: {e}", source) from e

    data = load_validated_yaml(text, read_schema(_PACKAGE, "codes.schema.json"), source)

    registry: dict[str, DiagnosticCode] = {}
    seen: dict[int, str] = {}
    for key, entry in data["codes"].items():
        if entry["code"] in seen:
            raise ConfigError(
                f"Code {entry['code']} assigned to both '{seen[entry['code']]}' and '{key}'",
                source,
            )
        seen[entry["code"]] = key
        registry[key] = DiagnosticCode(
            key=key,
            code=entry["code"],
            category=DiagnosticCategory(entry["category"]),
            message=entry["message"],
        )
    return registry


REGISTRY: Final[dict[str, DiagnosticCode]] = load_registry()

CANNOT_FIND_MODULE: Final[DiagnosticCode] = REGISTRY["Cannot_find_module_0"]
