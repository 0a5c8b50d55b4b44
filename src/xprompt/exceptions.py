"""Exceptions raised by xprompt.

Repository problems are never raised: the status inspector reports them as
an absent summary. Only configuration and shell selection errors reach the
CLI.
"""

from pathlib import Path
from typing import Any


class XPromptError(Exception):
    pass


class UnsupportedShellError(XPromptError):
    """No prompt syntax exists for the requested shell."""

    def __init__(self, message: str, *, shell: str) -> None:
        super().__init__(message)
        self.shell: str = shell


class ConfigError(XPromptError):
    pass


class ConfigLoadError(ConfigError):
    """A config file could not be parsed.

    Attributes:
        path: The file, when known.
        line: 1-based line of the syntax error, when known.
        column: 1-based column of the syntax error, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        path: Path | None = None,
        line: int | None = None,
        column: int | None = None,
    ) -> None:
        super().__init__(message)
        self.path: Path | None = path
        self.line: int | None = line
        self.column: int | None = column


class ConfigValidationError(ConfigError):
    """A configuration value was rejected by its section model.

    Attributes:
        key: Dotted path of the value, e.g. ``"prompt.no_color"``.
        value: The rejected value.
        expected: What would have been accepted.
        source: Config file involved, or None for non-file layers.
    """

    def __init__(
        self,
        message: str,
        *,
        key: str,
        value: Any,  # pyright: ignore[reportAny,reportExplicitAny]
        expected: str,
        source: str | None = None,
    ) -> None:
        super().__init__(message)
        self.key: str = key
        self.value: Any = value  # pyright: ignore[reportExplicitAny]
        self.expected: str = expected
        self.source: str | None = source
