"""Loading of YAML documents validated against bundled JSON schemas."""

from __future__ import annotations

import json
import logging
from importlib import resources
from typing import Any

import jsonschema
import yaml

from tsbridge.errors import ConfigError

logger = logging.getLogger(__name__)


def read_text(package: str, name: str) -> str:
    """Read a data file bundled with *package*."""
    return resources.files(package).joinpath(name).read_text(encoding="utf-8")


def read_schema(package: str, name: str) -> dict[str, Any]:
    """Load a JSON schema bundled with *package*."""
    return json.loads(read_text(package, name))


def schema_error(data: Any, schema: dict[str, Any]) -> jsonschema.ValidationError | None:
    """Return the most relevant validation error of *data*, or None if it is valid."""
    validator = jsonschema.validators.validator_for(schema)(schema)
    return jsonschema.exceptions.best_match(validator.iter_errors(data))


def error_fields(error: jsonschema.ValidationError) -> tuple[str, ...]:
    """Name the offending fields of *error* as dotted paths."""
    prefix = ".".join(str(p) for p in error.absolute_path)
    if error.validator == "required" and isinstance(error.instance, dict):
        missing = [name for name in error.validator_value if name not in error.instance]
        return tuple(f"{prefix}.{name}" if prefix else name for name in missing)
    return (prefix,) if prefix else ()


def describe_error(error: jsonschema.ValidationError) -> str:
    message = error.message
    if error.absolute_path:
        message += f" (at path: {' -> '.join(str(p) for p in error.absolute_path)})"
    return message


def load_validated_yaml(
    text: str,
    schema: dict[str, Any],
    source: str,
    allow_empty: bool = False,
) -> dict[str, Any]:
    """Parse YAML *text* and validate it against *schema*.

    With *allow_empty*, a document with no content (blank or only comments)
    is an empty mapping.

    Raises:
        ConfigError: The text is not valid YAML or does not match the schema.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {source}: {e}", source) from e
    if data is None and allow_empty:
        data = {}

    error = schema_error(data, schema)
    if error is not None:
        raise ConfigError(f"Schema validation error in {source}: {describe_error(error)}", source) from error

    logger.debug(f"Loaded {source}")
    return data
