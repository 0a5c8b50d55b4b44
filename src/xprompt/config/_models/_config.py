# pyright: reportExplicitAny=false, reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""The merged, validated configuration."""

from collections.abc import Mapping
from functools import reduce
from pathlib import Path
from typing import Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, PrivateAttr

from xprompt.config._defaults import DEFAULT_CONFIG
from xprompt.config._loader import deep_merge, read_toml_file
from xprompt.config._models._common import ConfigSource, ConfigSourceName
from xprompt.config._models._logging import LoggingConfig
from xprompt.config._models._prompt import PromptConfig


class Config(BaseModel):
    """Immutable configuration with typed access to each section.

    Build instances with from_dict(), from_file() or load(); the raw merged
    data stays available through to_dict().
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True)

    _data: dict[str, Any] = PrivateAttr(default_factory=dict)
    _sources: tuple[ConfigSource, ...] = PrivateAttr(default=())
    _logging: LoggingConfig = PrivateAttr(default_factory=LoggingConfig)
    _prompt: PromptConfig = PrivateAttr(default_factory=PromptConfig)

    @classmethod
    def from_sources(
        cls,
        sources: list[ConfigSource],
        *,
        validate: bool = True,
    ) -> Self:
        """Merge sources given from lowest to highest precedence.

        Raises:
            ConfigValidationError: If the merged data is invalid.
        """
        # Deferred import to avoid circular dependency
        from xprompt.config._validation import (  # noqa: PLC0415
            raise_if_validation_errors,
            validate_config,
        )

        merged: dict[str, Any] = reduce(
            deep_merge, (source.values for source in sources), {}
        )
        if validate:
            file_source = next((s for s in sources if s.path is not None), None)
            raise_if_validation_errors(
                validate_config(merged),
                source=None if file_source is None else str(file_source.path),
            )

        config = cls()
        config._data = merged
        config._sources = tuple(reversed(sources))
        config._logging = LoggingConfig.model_validate(merged.get("logging", {}))
        config._prompt = PromptConfig.model_validate(merged.get("prompt", {}))
        return config

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, validate: bool = True) -> Self:
        """Build configuration from ``data`` layered over the defaults."""
        return cls.from_sources(
            [
                ConfigSource(ConfigSourceName.DEFAULT, DEFAULT_CONFIG),
                ConfigSource(ConfigSourceName.CLI, dict(data)),
            ],
            validate=validate,
        )

    @classmethod
    def from_file(cls, path: Path, *, validate: bool = True) -> Self:
        """Build configuration from one TOML file layered over the defaults.

        Raises:
            FileNotFoundError: If the file does not exist.
            ConfigLoadError: If the file is not valid TOML.
            ConfigValidationError: If a value is invalid.
        """
        return cls.from_sources(
            [
                ConfigSource(ConfigSourceName.DEFAULT, DEFAULT_CONFIG),
                ConfigSource(ConfigSourceName.USER, read_toml_file(path), path),
            ],
            validate=validate,
        )

    @classmethod
    def load(
        cls,
        *,
        user_config_path: Path | None = None,
        include_env: bool = True,
        cli_overrides: dict[str, Any] | None = None,
    ) -> Self:
        """Load defaults, the user file, the environment and CLI overrides.

        Raises:
            ConfigLoadError: If the user config file is not valid TOML.
            ConfigValidationError: If the merged configuration is invalid.
        """
        from xprompt.config._sources import collect_sources  # noqa: PLC0415

        return cls.from_sources(
            collect_sources(
                user_config_path=user_config_path,
                include_env=include_env,
                cli_overrides=cli_overrides,
            )
        )

    @property
    def sources(self) -> list[ConfigSource]:
        """Layers that contributed values, highest precedence first."""
        return list(self._sources)

    @property
    def logging(self) -> LoggingConfig:
        return self._logging

    @property
    def prompt(self) -> PromptConfig:
        return self._prompt

    def to_dict(self) -> dict[str, Any]:
        """Return a copy of the merged configuration data."""
        return deep_merge({}, self._data)
