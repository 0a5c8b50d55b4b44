"""xprompt configuration.

Settings are layered from lowest to highest precedence: built-in defaults,
the user's TOML file, ``XPROMPT_<SECTION>__<KEY>`` environment variables and
command-line options.

Example:
    >>> from xprompt.config import Config
    >>> Config.from_dict({"prompt": {"shell": "zsh"}}).prompt.shell
    'zsh'
"""

from xprompt.exceptions import (
    ConfigError,
    ConfigLoadError,
    ConfigValidationError,
)

from ._defaults import DEFAULT_CONFIG
from ._load import safe_load_config
from ._loader import deep_merge, parse_env_vars, read_toml_file, set_nested_key
from ._models import (
    Config,
    ConfigSource,
    ConfigSourceName,
    LogFormat,
    LoggingConfig,
    LogLevel,
    PromptConfig,
)
from ._sources import collect_sources, get_user_config_path
from ._validation import ValidationIssue, validate_config

__all__ = [
    "DEFAULT_CONFIG",
    "Config",
    "ConfigError",
    "ConfigLoadError",
    "ConfigSource",
    "ConfigSourceName",
    "ConfigValidationError",
    "LogFormat",
    "LogLevel",
    "LoggingConfig",
    "PromptConfig",
    "ValidationIssue",
    "collect_sources",
    "deep_merge",
    "get_user_config_path",
    "parse_env_vars",
    "read_toml_file",
    "safe_load_config",
    "set_nested_key",
    "validate_config",
]
