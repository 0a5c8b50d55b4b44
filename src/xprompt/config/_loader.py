# pyright: reportAny=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Reading the raw configuration layers: TOML file and environment."""

import os
import re
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from xprompt.exceptions import ConfigLoadError

ENV_PREFIX = "XPROMPT_"

# Separates section from key in XPROMPT_<SECTION>__<KEY>
_ENV_SEPARATOR = "__"

# tomllib appends "(at line L, column C)" to its messages before Python 3.14
_POSITION_RE = re.compile(r"\(at line (\d+), column (\d+)\)$")


def _error_position(error: tomllib.TOMLDecodeError) -> tuple[int | None, int | None]:
    line: int | None = getattr(error, "lineno", None)
    column: int | None = getattr(error, "colno", None)
    if line is None and (match := _POSITION_RE.search(str(error))):
        line, column = int(match.group(1)), int(match.group(2))
    return line, column


def read_toml_file(path: Path) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Parse a TOML config file.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigLoadError: If the file is not valid TOML.
    """
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        msg = f"Invalid TOML in {path}: {e}"
        line, column = _error_position(e)
        raise ConfigLoadError(msg, path=path, line=line, column=column) from e


def deep_merge(
    base: Mapping[str, Any],  # pyright: ignore[reportExplicitAny]
    override: Mapping[str, Any],  # pyright: ignore[reportExplicitAny]
) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Return ``base`` with ``override`` layered on top.

    Tables merge key by key; any other value in ``override`` replaces the one
    in ``base`` outright. Neither argument is modified and the result shares
    no tables with them.
    """
    merged = {key: _copy_tables(value) for key, value in base.items()}
    for key, value in override.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, Mapping):
            merged[key] = deep_merge(current, value)
        else:
            merged[key] = _copy_tables(value)
    return merged


def _copy_tables(value: Any) -> Any:  # pyright: ignore[reportExplicitAny]
    if isinstance(value, Mapping):
        return {key: _copy_tables(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_copy_tables(item) for item in value]
    return value


def parse_env_vars(
    prefix: str = ENV_PREFIX,
    environ: Mapping[str, str] | None = None,
) -> dict[str, Any]:  # pyright: ignore[reportExplicitAny]
    """Collect ``XPROMPT_<SECTION>__<KEY>`` overrides.

    Values are kept as strings; the config models coerce them (``"true"``
    and ``"1"`` both validate as a boolean). Variables without a section
    separator, such as ``XPROMPT_DEBUG``, are process switches rather than
    settings and are skipped.

    Example:
        >>> parse_env_vars(environ={"XPROMPT_PROMPT__SHELL": "zsh"})
        {'prompt': {'shell': 'zsh'}}
    """
    source = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}  # pyright: ignore[reportExplicitAny]

    for name, value in source.items():
        if not name.startswith(prefix):
            continue
        section, sep, key = name[len(prefix) :].partition(_ENV_SEPARATOR)
        if not (sep and section and key):
            continue
        set_nested_key(overrides, f"{section}.{key}".lower().replace("__", "."), value)

    return overrides


def set_nested_key(
    d: dict[str, Any],  # pyright: ignore[reportExplicitAny]
    key_path: str,
    value: Any,  # pyright: ignore[reportExplicitAny]
) -> None:
    """Assign ``value`` at a dotted path, replacing non-table parents.

    Example:
        >>> d = {}
        >>> set_nested_key(d, "logging.level", "debug")
        >>> d
        {'logging': {'level': 'debug'}}
    """
    *parents, leaf = key_path.split(".")
    table = d
    for part in parents:
        child = table.get(part)
        if not isinstance(child, dict):
            child = table[part] = {}
        table = child
    table[leaf] = value
