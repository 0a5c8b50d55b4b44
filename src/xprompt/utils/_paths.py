from pathlib import Path

import platformdirs


def get_log_dir() -> Path:
    """Get the platform-specific directory for xprompt log files."""
    return platformdirs.user_log_path("xprompt")


def get_cli_log_file() -> Path:
    """Get the path to the default CLI log file."""
    return get_log_dir() / "xprompt.log"
