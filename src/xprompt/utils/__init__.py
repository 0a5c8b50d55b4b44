"""Utility functions for xprompt."""

from ._git import (
    FileStatus,
    StatusFlag,
    StatusSummary,
    discover_repo,
    inspect,
    sorted_flags,
)
from ._logging import create_cli_logger, create_null_logger
from ._paths import get_cli_log_file, get_log_dir

__all__ = [
    "FileStatus",
    "StatusFlag",
    "StatusSummary",
    "create_cli_logger",
    "create_null_logger",
    "discover_repo",
    "get_cli_log_file",
    "get_log_dir",
    "inspect",
    "sorted_flags",
]
