"""Resolution of the command a prompt uses to call back into xprompt."""

import os
import sys
from pathlib import Path

DEFAULT_EXECUTABLE = "xprompt"


def resolve_executable(explicit: str | None = None, argv0: str | None = None) -> str:
    """Return the command used to re-invoke xprompt from a prompt.

    Args:
        explicit: Command given on the command line or in configuration.
        argv0: Path the process was started as. Defaults to ``sys.argv[0]``.

    Returns:
        ``explicit`` if given; otherwise the absolute path of the running
        executable when it is an executable file (not a ``.py`` module run
        through the interpreter); otherwise the bare command name, left for
        the shell to find on ``$PATH``.
    """
    if explicit:
        return explicit

    candidate = argv0 if argv0 is not None else (sys.argv[0] if sys.argv else "")
    if candidate:
        path = Path(candidate)
        if path.suffix != ".py" and path.is_file() and os.access(path, os.X_OK):
            return str(path.absolute())

    return DEFAULT_EXECUTABLE
