"""Locating and reading the configuration layers."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import platformdirs

from ._defaults import DEFAULT_CONFIG
from ._loader import parse_env_vars, read_toml_file
from ._models._common import ConfigSource, ConfigSourceName


def get_user_config_path() -> Path:
    r"""Return where the user config file lives, whether or not it exists.

    ``~/.config/xprompt/config.toml`` on Linux (honoring ``$XDG_CONFIG_HOME``),
    ``~/Library/Application Support/xprompt/config.toml`` on macOS and
    ``%APPDATA%\xprompt\config.toml`` on Windows.
    """
    return platformdirs.user_config_path("xprompt") / "config.toml"


def collect_sources(
    *,
    user_config_path: Path | None = None,
    include_env: bool = True,
    environ: Mapping[str, str] | None = None,
    cli_overrides: dict[str, Any] | None = None,  # pyright: ignore[reportExplicitAny]
) -> list[ConfigSource]:
    """Read every configuration layer that is present.

    A missing user config file is not an error: the layer is left out.

    Returns:
        Sources from lowest to highest precedence, ready to be merged in
        order. The defaults are always first.

    Raises:
        ConfigLoadError: If the user config file is not valid TOML.
        OSError: If the user config file exists but cannot be read.
    """
    sources = [ConfigSource(ConfigSourceName.DEFAULT, DEFAULT_CONFIG)]

    user_path = user_config_path or get_user_config_path()
    if user_path.is_file():
        sources.append(
            ConfigSource(ConfigSourceName.USER, read_toml_file(user_path), user_path)
        )

    if include_env:
        env_values = parse_env_vars(environ=environ)
        if env_values:
            sources.append(ConfigSource(ConfigSourceName.ENV, env_values))

    if cli_overrides:
        sources.append(ConfigSource(ConfigSourceName.CLI, cli_overrides))

    return sources
