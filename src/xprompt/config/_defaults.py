"""Built-in configuration values, the lowest configuration layer.

``logging.level`` has no default: when no layer sets it, the
``XPROMPT_LOG_LEVEL`` environment variable decides.
"""

from typing import Any

DEFAULT_CONFIG: dict[str, Any] = {  # pyright: ignore[reportExplicitAny]
    "logging": {
        "format": "json",
        "file": "",
    },
    "prompt": {
        "shell": "",
        "executable": "",
        "no_color": False,
        "timestamp_format": "%Y-%m-%dT%H:%M:%S",
    },
}
