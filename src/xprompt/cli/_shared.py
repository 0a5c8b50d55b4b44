"""Exit codes and error reporting for the CLI."""

from enum import IntEnum
from typing import TYPE_CHECKING, Never

if TYPE_CHECKING:
    from rich.console import Console

__all__ = [
    "ExitCode",
    "exit_with_error",
    "get_error_console",
]


class ExitCode(IntEnum):
    SUCCESS = 0
    # Config file named with --config is missing, or strict config failed
    LOAD_ERROR = 1
    # Conflicting mode flags or an unsupported shell
    VALIDATION_ERROR = 2
    INTERNAL_ERROR = 5


def get_error_console() -> "Console":  # noqa: UP037
    from rich.console import Console  # noqa: PLC0415

    return Console(stderr=True)


def exit_with_error(
    message: str,
    code: ExitCode = ExitCode.INTERNAL_ERROR,
    *,
    console: "Console | None" = None,  # noqa: UP037
) -> Never:
    """Report ``message`` on stderr and exit.

    Nothing is written to stdout, so a prompt variable assigned from the
    output is left empty rather than holding an error message.

    Raises:
        SystemExit: Always, with ``code``.
    """
    (console or get_error_console()).print(f"[red]Error:[/red] {message}")
    raise SystemExit(code)
