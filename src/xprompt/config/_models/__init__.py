"""Configuration models.

This module provides Pydantic models for xprompt configuration sections
and the main Config container class.
"""

from xprompt.config._models._common import (
    ConfigSource,
    ConfigSourceName,
    LogFormat,
    LogLevel,
)
from xprompt.config._models._config import Config
from xprompt.config._models._logging import LoggingConfig
from xprompt.config._models._prompt import PromptConfig

__all__ = [
    "Config",
    "ConfigSource",
    "ConfigSourceName",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "PromptConfig",
]
