"""Structured logging for xprompt.

Loggers are standalone structlog loggers writing to a file: stdout carries
the prompt and is parsed by the shell, and stderr would be drawn on the
user's terminal, so neither stream is ever written to. Global structlog
configuration is left untouched.
"""

import logging
from os import getenv
from pathlib import Path
from typing import TYPE_CHECKING, Literal, cast

import structlog

from ._paths import get_cli_log_file

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

LogFormatType = Literal["json", "text"]

DEBUG_ENV_VAR = "XPROMPT_DEBUG"
LEVEL_ENV_VAR = "XPROMPT_LOG_LEVEL"


def resolve_log_level(level: str | None = None) -> int:
    """Pick the log level threshold.

    ``XPROMPT_DEBUG`` (any non-empty value) forces DEBUG. Otherwise the
    configured ``level`` is used, then ``XPROMPT_LOG_LEVEL``, then WARNING.
    Unknown level names also resolve to WARNING.
    """
    if getenv(DEBUG_ENV_VAR):
        return logging.DEBUG

    name = level or getenv(LEVEL_ENV_VAR) or "warning"
    return logging.getLevelNamesMapping().get(name.upper(), logging.WARNING)


def _build_processors(log_format: LogFormatType) -> list[structlog.typing.Processor]:
    processors: list[structlog.typing.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if log_format == "json":
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        # "timestamp [level] event key=value ..."
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    return processors


def _create_logger(
    log_file_path: str,
    *,
    log_level: int | None = None,
    log_format: LogFormatType = "json",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create a logger appending to ``log_file_path``.

    Args:
        log_file_path: Log file; missing parent directories are created.
        log_level: Threshold; resolved from the environment when None.
        log_format: "json" for one JSON object per line, "text" for
            human-readable lines.
    """
    log_path = Path(log_file_path)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    threshold = log_level if log_level is not None else resolve_log_level()

    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.WriteLoggerFactory(file=log_path.open("a"))(),
            processors=_build_processors(log_format),
            wrapper_class=structlog.make_filtering_bound_logger(threshold),
            context_class=dict,
        ),
    )


def create_null_logger() -> "FilteringBoundLogger":  # noqa: UP037
    """Create a logger that discards every event."""
    return cast(
        "FilteringBoundLogger",
        structlog.wrap_logger(
            structlog.ReturnLogger(),
            processors=[],
            wrapper_class=structlog.make_filtering_bound_logger(logging.CRITICAL),
            context_class=dict,
        ),
    )


def create_cli_logger(
    *,
    level: str | None = None,
    log_format: LogFormatType = "json",
    log_file: str = "",
    command: str = "",
) -> "FilteringBoundLogger":  # noqa: UP037
    """Create the logger for one CLI invocation.

    Args:
        level: Configured level name, or None to defer to the environment
            (see resolve_log_level).
        log_format: "json" or "text".
        log_file: Log file path; empty uses ``xprompt.log`` in the platform
            log directory.
        command: Mode being rendered, bound to every entry.

    Returns:
        The file logger, or a null logger when the log file cannot be
        created or opened.
    """
    try:
        logger = _create_logger(
            log_file or str(get_cli_log_file()),
            log_level=resolve_log_level(level),
            log_format=log_format,
        )
    except OSError:
        return create_null_logger()
    return logger.bind(command=command) if command else logger
