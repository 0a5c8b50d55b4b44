"""Configuration loading for the CLI, where a prompt must still render."""

import os
import sys
from pathlib import Path
from typing import Never

from xprompt.exceptions import ConfigError

from ._models import Config

STRICT_ENV_VAR = "XPROMPT_STRICT_CONFIG"


def _fail(message: str) -> Never:
    print(f"Error: {message}", file=sys.stderr)  # noqa: T201
    sys.exit(1)


def safe_load_config(
    *,
    config_path: Path | None = None,
    cli_overrides: dict[str, object] | None = None,
    warn: bool = True,
) -> tuple[Config, str | None]:
    """Load configuration, falling back to defaults on failure.

    An unreadable or invalid config file prints a warning to stderr (unless
    ``warn`` is false) and the defaults (plus ``cli_overrides``) are used, so
    the shell still gets a prompt. With ``XPROMPT_STRICT_CONFIG=1`` the
    process exits with status 1 instead. An explicit ``config_path`` that does
    not exist always exits.

    Returns:
        The configuration and, when the fallback was taken, the error message.
    """
    if config_path is not None and not config_path.exists():
        _fail(f"Config file not found: {config_path}")

    try:
        config = Config.load(user_config_path=config_path, cli_overrides=cli_overrides)
    except (ConfigError, OSError) as e:
        error_msg = f"Failed to load config: {e}"
    else:
        return config, None

    if os.environ.get(STRICT_ENV_VAR, "0") == "1":
        _fail(error_msg)
    if warn:
        print(f"Warning: {error_msg}", file=sys.stderr)  # noqa: T201
    return Config.from_dict(cli_overrides or {}, validate=False), error_msg
