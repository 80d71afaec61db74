"""
Error types for palette loading, theme selection, and stylesheet rendering.

Every error raised by the pipeline is terminal for the current run. The CLI
prints the message and exits non-zero; nothing is retried.
"""

from enum import StrEnum
from pathlib import Path


class OasisError(Exception):
    """Base exception for all oasis-vimiumc errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigErrorKind(StrEnum):
    NOT_FOUND = "not_found"
    PARSE_ERROR = "parse_error"


class ConfigError(OasisError):
    """
    Raised when a configuration resource cannot be used.

    Examples:
    - Index file or palette file missing
    - Malformed JSON in the index or a palette
    - Palette JSON with the wrong shape
    - Malformed oasis.toml
    """

    def __init__(self, kind: ConfigErrorKind, message: str, path: Path | None = None):
        self.kind = kind
        self.path = path
        super().__init__(message)


class SelectionErrorKind(StrEnum):
    INVALID_CHOICE = "invalid_choice"


class SelectionError(OasisError):
    """Raised when interactive input is out of range, non-numeric, or missing."""

    def __init__(self, message: str, kind: SelectionErrorKind = SelectionErrorKind.INVALID_CHOICE):
        self.kind = kind
        super().__init__(message)


class RenderErrorKind(StrEnum):
    IO_FAILURE = "io_failure"
    TEMPLATE_FAILURE = "template_failure"
    BINDING_CONFLICT = "binding_conflict"


class RenderError(OasisError):
    """
    Raised when the stylesheet cannot be produced.

    Examples:
    - Template missing or syntactically invalid
    - Template references a variable the binding does not define
    - Output directory or file not writable
    """

    def __init__(self, kind: RenderErrorKind, message: str, path: Path | None = None):
        self.kind = kind
        self.path = path
        super().__init__(message)


def not_found(what: str, path: Path) -> ConfigError:
    """Helper to create a NOT_FOUND ConfigError for a missing file."""
    return ConfigError(ConfigErrorKind.NOT_FOUND, f"{what} not found: {path}", path)


def parse_failure(what: str, path: Path, detail: object) -> ConfigError:
    """Helper to create a PARSE_ERROR ConfigError carrying the parser's message."""
    return ConfigError(
        ConfigErrorKind.PARSE_ERROR,
        f"Failed to parse {what} {path}: {detail}",
        path,
    )
