"""Types shared by the configuration models."""

from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Any


class LogLevel(StrEnum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class LogFormat(StrEnum):
    JSON = "json"
    TEXT = "text"


class ConfigSourceName(StrEnum):
    """Configuration layers, from lowest to highest precedence."""

    DEFAULT = "default"
    USER = "user"
    ENV = "env"
    CLI = "cli"


@dataclass(frozen=True, slots=True)
class ConfigSource:
    """One layer that contributed values to the merged configuration.

    Attributes:
        name: Which layer this is.
        values: The raw (unvalidated) values it contributed.
        path: File the values were read from, for file layers.
    """

    name: ConfigSourceName
    values: dict[str, Any] = field(default_factory=dict)  # pyright: ignore[reportExplicitAny]
    path: Path | None = None
