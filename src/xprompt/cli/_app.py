"""The command-line interface for xprompt."""
# ruff: noqa: TC003  # Path needed at runtime for cyclopts parameter parsing

import os
import sys
from pathlib import Path
from typing import Annotated

from cyclopts import App, Parameter
from rich.console import Console

from xprompt import __version__
from xprompt.config import Config, safe_load_config
from xprompt.enums import Mode, Shell
from xprompt.exceptions import UnsupportedShellError
from xprompt.prompt import PromptAssembler, detect_shell, resolve_executable
from xprompt.utils import create_cli_logger

from ._shared import ExitCode, exit_with_error

HELP = "Render a git-aware shell prompt."


def select_mode(*, ps1: bool, ps2: bool, status: bool, init: bool) -> Mode | None:
    """Map the mode flags to a Mode.

    Returns:
        The selected mode, PREVIEW when no flag is set, or None when more
        than one flag is set.
    """
    selected = [
        mode
        for mode, enabled in (
            (Mode.PRIMARY, ps1),
            (Mode.CONTINUATION, ps2),
            (Mode.STATUS, status),
            (Mode.INIT, init),
        )
        if enabled
    ]
    if len(selected) > 1:
        return None
    return selected[0] if selected else Mode.PREVIEW


def _cli_overrides(
    shell: Shell | None, executable: str | None, *, no_color: bool
) -> dict[str, object] | None:
    prompt: dict[str, object] = {}
    if shell is not None:
        prompt["shell"] = shell.value
    if executable:
        prompt["executable"] = executable
    if no_color:
        prompt["no_color"] = True
    return {"prompt": prompt} if prompt else None


def color_enabled(config: Config) -> bool:
    """Styling is on unless disabled in config or via the NO_COLOR convention."""
    return not (config.prompt.no_color or os.environ.get("NO_COLOR"))


def create_app(
    console: Console | None = None,
    error_console: Console | None = None,
    *,
    exit_on_error: bool = True,
) -> App:
    if console is None:
        console = Console()
    if error_console is None:
        error_console = Console(stderr=True)
    app = App(
        name="xprompt",
        help=HELP,
        version=__version__,
        help_on_error=True,
        console=console,
        error_console=error_console,
        exit_on_error=exit_on_error,
    )

    @app.default
    def _default(  # pyright: ignore[reportUnusedFunction]
        *,
        ps1: Annotated[
            bool, Parameter(negative="", help="Print the primary prompt (PS1)")
        ] = False,
        ps2: Annotated[
            bool, Parameter(negative="", help="Print the continuation prompt (PS2)")
        ] = False,
        status: Annotated[
            bool,
            Parameter(negative="", help="Print the git status of the current directory"),
        ] = False,
        init: Annotated[
            bool, Parameter(negative="", help="Print the shell integration snippet")
        ] = False,
        shell: Annotated[
            Shell | None, Parameter(help="Shell to emit syntax for")
        ] = None,
        executable: Annotated[
            str | None,
            Parameter(help="Command the prompt uses to call back into xprompt"),
        ] = None,
        no_color: Annotated[
            bool,
            Parameter(name="--no-color", negative="", help="Disable colored output"),
        ] = False,
        config: Annotated[
            Path | None, Parameter(name="--config", help="Path to config file")
        ] = None,
    ) -> None:
        """Render a git-aware shell prompt.

        Without a mode flag, prints the prompt expanded for the current
        directory.

        Args:
            ps1: Print the primary prompt template.
            ps2: Print the continuation prompt.
            status: Print the git segment for the current directory.
            init: Print the snippet that installs the prompts.
            shell: Shell to emit syntax for (defaults to $SHELL, then bash).
            executable: Command the prompt uses to call back into xprompt.
            no_color: Disable colored output.
            config: Explicit path to config file.
        """
        mode = select_mode(ps1=ps1, ps2=ps2, status=status, init=init)
        if mode is None:
            exit_with_error(
                "Only one of --ps1, --ps2, --status and --init may be given",
                ExitCode.VALIDATION_ERROR,
                console=error_console,
            )

        loaded_config, config_error = safe_load_config(
            config_path=config,
            cli_overrides=_cli_overrides(shell, executable, no_color=no_color),
            # Status and PS2 output is regenerated for every prompt
            warn=mode not in {Mode.STATUS, Mode.CONTINUATION},
        )

        logger = create_cli_logger(
            level=loaded_config.logging.level,
            log_format=loaded_config.logging.format.value,  # type: ignore[arg-type]
            log_file=loaded_config.logging.file,
            command=mode.value,
        )
        if config_error is not None:
            logger.warning("config_fallback", error=config_error)

        try:
            target_shell = detect_shell(loaded_config.prompt.shell)
        except UnsupportedShellError as e:
            exit_with_error(str(e), ExitCode.VALIDATION_ERROR, console=error_console)

        assembler = PromptAssembler(
            shell=target_shell,
            executable=resolve_executable(loaded_config.prompt.executable or None),
            color=color_enabled(loaded_config),
            timestamp_format=loaded_config.prompt.timestamp_format,
            logger=logger,
        )
        output = assembler.render(mode)
        logger.debug("rendered", shell=target_shell.value, length=len(output))

        # The shell consumes stdout verbatim, so bypass rich markup handling
        _ = sys.stdout.write(output)
        sys.stdout.flush()

    return app


app = create_app()


def main() -> None:
    """Default entrypoint for the `xprompt` CLI."""
    app()


if __name__ == "__main__":
    main()
