"""Error types raised by tsbridge."""

from __future__ import annotations


class TsBridgeError(Exception):
    """Base class for all tsbridge errors."""


class ParseError(TsBridgeError):
    """Raised when structured input (a source map) cannot be parsed."""

    def __init__(self, message: str, source: str | None = None) -> None:
        super().__init__(message)
        self.source = source


class InvalidArgument(TsBridgeError):
    """Raised when externally supplied data is missing required fields."""

    def __init__(self, message: str, fields: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.fields = fields


class ConfigError(TsBridgeError):
    """Raised when a settings file or bundled registry fails validation."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path
