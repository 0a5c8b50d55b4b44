"""xprompt: a git-aware shell prompt renderer."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("xprompt")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = ["__version__"]
