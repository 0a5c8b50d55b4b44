"""Environment facts shown in the prompt.

Missing facts (an unset variable, a deleted working directory) render as
empty strings rather than errors.
"""

import socket
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from os import environ as os_environ
from pathlib import Path


@dataclass(frozen=True, slots=True)
class PromptEnvironment:
    """Resolved facts for one prompt render.

    Attributes:
        timestamp: Formatted local time.
        user: Login name, or empty if unknown.
        host: Host name, or empty if unknown.
        directory: Working directory with the home prefix shown as ``~``.
    """

    timestamp: str
    user: str
    host: str
    directory: str


def get_current_dir(environ: Mapping[str, str] | None = None) -> str:
    """Return the working directory as the shell reports it.

    ``$PWD`` keeps the logical path through symlinks; when it is unset the
    process working directory is used instead.
    """
    env = os_environ if environ is None else environ
    pwd = env.get("PWD")
    if pwd:
        return pwd
    try:
        return str(Path.cwd())
    except OSError:
        return ""


def get_host() -> str:
    try:
        return socket.gethostname()
    except OSError:
        return ""


def get_relative_dir(home: str | None, current: str) -> str:
    """Abbreviate the home directory prefix of ``current`` to ``~``.

    Examples:
        >>> get_relative_dir("/home/ada", "/home/ada/src")
        '~/src'
        >>> get_relative_dir("/home/ada", "/home/adam")
        '/home/adam'
    """
    if not home or not current:
        return current
    home_root = home.rstrip("/")
    if not home_root:
        return current
    if current == home_root:
        return "~"
    if current.startswith(f"{home_root}/"):
        return f"~{current[len(home_root) :]}"
    return current


def collect_environment(
    *,
    timestamp_format: str,
    now: datetime | None = None,
    environ: Mapping[str, str] | None = None,
) -> PromptEnvironment:
    """Gather the facts for a fully expanded prompt."""
    env = os_environ if environ is None else environ
    moment = now if now is not None else datetime.now().astimezone()
    return PromptEnvironment(
        timestamp=moment.strftime(timestamp_format),
        user=env.get("USER", ""),
        host=get_host(),
        directory=get_relative_dir(env.get("HOME"), get_current_dir(env)),
    )
