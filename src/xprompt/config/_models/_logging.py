"""Logging configuration model."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict

from xprompt.config._models._common import LogFormat, LogLevel


class LoggingConfig(BaseModel):
    """Logging section.

    Attributes:
        level: Log level threshold; None defers to ``XPROMPT_LOG_LEVEL``.
        format: Log output format.
        file: Path to the log file (empty uses the platform log directory).
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    level: LogLevel | None = None
    format: LogFormat = LogFormat.JSON
    file: str = ""
