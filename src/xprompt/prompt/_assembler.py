"""Prompt assembly.

PromptAssembler turns environment facts and a repository summary into the
string printed for each mode. Templates for prompt variables keep the shell's
own placeholders, so the shell fills in time, user, host and directory each
time the prompt is drawn, and the git segment is fetched by calling back into
xprompt in status mode.
"""

import shlex
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from xprompt.enums import Mode, Shell
from xprompt.prompt._environment import PromptEnvironment, collect_environment
from xprompt.prompt._init import render_init
from xprompt.prompt._palette import Color
from xprompt.prompt._shells import ShellSyntax, get_syntax
from xprompt.prompt._spans import StyledSpan, format_plain_spans, format_prompt_spans
from xprompt.utils import StatusSummary, create_null_logger, inspect

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

DEFAULT_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"
CONTINUATION_GLYPH = ">"


def context_spans(
    timestamp: str, user: str, host: str, directory: str
) -> list[StyledSpan]:
    """Spans for the ``<time> as <user> at <host> in <dir>`` segment."""
    return [
        StyledSpan(timestamp, Color.CYAN),
        StyledSpan(" as ", Color.WHITE),
        StyledSpan(user, Color.BLUE),
        StyledSpan(" at ", Color.WHITE),
        StyledSpan(host, Color.ORANGE),
        StyledSpan(" in ", Color.WHITE),
        StyledSpan(directory, Color.GREEN),
    ]


def status_spans(
    summary: StatusSummary | None, syntax: ShellSyntax | None = None
) -> list[StyledSpan]:
    """Spans for the ``on <branch> [<flags>]`` segment.

    Args:
        summary: Repository summary, or None outside a repository.
        syntax: Shell whose prompt will substitute this output. The branch
            label is escaped for it; None leaves it untouched.
    """
    if summary is None:
        return []

    branch = summary.branch
    if syntax is not None:
        branch = syntax.escape_output(branch)

    spans = [StyledSpan(" on ", Color.WHITE), StyledSpan(branch, Color.VIOLET)]
    if summary.flags:
        spans.append(StyledSpan(" [", Color.BLUE))
        spans.extend(StyledSpan(flag.glyph, Color.BLUE) for flag in summary.ordered_flags)
        spans.append(StyledSpan("]", Color.BLUE))
    return spans


def render_continuation(shell: Shell, *, color: bool = True) -> str:
    """Render the continuation prompt (PS2).

    Depends only on its arguments; the repository is never consulted.
    """
    glyph = StyledSpan(CONTINUATION_GLYPH, Color.YELLOW)
    return f"{format_prompt_spans([glyph], get_syntax(shell), color=color)} "


def render_status(
    summary: StatusSummary | None, shell: Shell, *, color: bool = True
) -> str:
    """Render the git segment printed for command substitution."""
    syntax = get_syntax(shell)
    return format_plain_spans(status_spans(summary, syntax), color=color)


def render_primary(
    shell: Shell,
    executable: str,
    *,
    color: bool = True,
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT,
) -> str:
    """Render the primary prompt template (PS1).

    The first line holds the shell's placeholders followed by a command
    substitution calling ``executable`` in status mode; the second line holds
    the input glyph.
    """
    syntax = get_syntax(shell)
    context = format_prompt_spans(
        context_spans(
            syntax.timestamp_placeholder(timestamp_format),
            syntax.user,
            syntax.host,
            syntax.directory,
        ),
        syntax,
        color=color,
    )

    args = [executable, "--status", "--shell", shell.value]
    if not color:
        args.append("--no-color")
    status = syntax.command_substitution(shlex.join(args))

    glyph = format_prompt_spans(
        [StyledSpan(syntax.prompt_glyph, Color.WHITE)], syntax, color=color
    )
    return f"{context}{status}\n{glyph} "


def render_preview(
    environment: PromptEnvironment,
    summary: StatusSummary | None,
    *,
    color: bool = True,
) -> str:
    """Render the prompt fully expanded with the current facts."""
    spans = context_spans(
        environment.timestamp,
        environment.user,
        environment.host,
        environment.directory,
    )
    spans.extend(status_spans(summary))
    return format_plain_spans(spans, color=color)


@dataclass(frozen=True, slots=True)
class PromptAssembler:
    """Renders the output of each mode for one invocation.

    Attributes:
        shell: Shell whose prompt syntax is emitted.
        executable: Command embedded in templates to call back into xprompt.
        color: Whether spans are styled.
        timestamp_format: strftime format for timestamps.
        logger: Logger for degraded repository queries.
    """

    shell: Shell
    executable: str
    color: bool = True
    timestamp_format: str = DEFAULT_TIMESTAMP_FORMAT
    logger: "FilteringBoundLogger" = field(  # noqa: UP037
        default_factory=create_null_logger, repr=False
    )

    def inspect_cwd(self, cwd: Path | None = None) -> StatusSummary | None:
        """Query the repository enclosing ``cwd`` (the process directory by default)."""
        if cwd is None:
            try:
                cwd = Path.cwd()
            except OSError:
                self.logger.debug("cwd_unavailable", exc_info=True)
                return None
        return inspect(cwd, logger=self.logger)

    def primary(self) -> str:
        return render_primary(
            self.shell,
            self.executable,
            color=self.color,
            timestamp_format=self.timestamp_format,
        )

    def continuation(self) -> str:
        return render_continuation(self.shell, color=self.color)

    def status(self, cwd: Path | None = None) -> str:
        return render_status(self.inspect_cwd(cwd), self.shell, color=self.color)

    def init(self) -> str:
        return render_init(self.shell, self.executable, color=self.color)

    def preview(
        self,
        cwd: Path | None = None,
        environment: PromptEnvironment | None = None,
    ) -> str:
        env = environment or collect_environment(timestamp_format=self.timestamp_format)
        return render_preview(env, self.inspect_cwd(cwd), color=self.color)

    def render(self, mode: Mode) -> str:
        """Render the output for ``mode``."""
        match mode:
            case Mode.PRIMARY:
                return self.primary()
            case Mode.CONTINUATION:
                return self.continuation()
            case Mode.STATUS:
                return self.status()
            case Mode.INIT:
                return self.init()
            case Mode.PREVIEW:
                return self.preview()
