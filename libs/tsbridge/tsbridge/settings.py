"""Configuration settings for tsbridge.

Settings can be built directly or loaded from a YAML file such as::

    new_line: "\\r\\n"
    case_sensitive_file_names: false
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from tsbridge.errors import ConfigError
from tsbridge.resources import load_validated_yaml, read_schema

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Settings shared by the diagnostic and path helpers.

    Attributes:
        new_line: Separator used when flattening nested diagnostic messages
        case_sensitive_file_names: Whether exclude patterns match case-sensitively
    """

    new_line: str = "\n"
    case_sensitive_file_names: bool = True


DEFAULT_SETTINGS = Settings()


def load_settings(path: str | Path) -> Settings:
    """Load settings from a YAML file; missing keys keep their defaults.

    Raises:
        ConfigError: The file is missing, not YAML, or has unknown/invalid keys.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read settings file {path}: {e}", str(path)) from e

    data = load_validated_yaml(
        text, read_schema("tsbridge", "settings.schema.json"), str(path), allow_empty=True
    )

    settings = Settings(**data)
    logger.debug(f"Settings from {path}: {settings}")
    return settings
