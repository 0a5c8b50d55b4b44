"""Prompt syntax for each supported shell."""

from collections.abc import Mapping
from dataclasses import dataclass
from os import environ as os_environ
from pathlib import Path
from types import MappingProxyType

from xprompt.enums import Shell
from xprompt.exceptions import UnsupportedShellError


@dataclass(frozen=True, slots=True)
class ShellSyntax:
    """Placeholders and escaping rules of one shell's prompt language.

    Attributes:
        shell: The shell this syntax belongs to.
        timestamp: Placeholder template for a strftime-formatted timestamp.
        user: Placeholder for the user name.
        host: Placeholder for the short host name.
        directory: Placeholder for the working directory, home as ``~``.
        prompt_glyph: Placeholder for the input glyph (``#`` for root).
        nonprinting_start: Marker opening a run of zero-width bytes.
        nonprinting_end: Marker closing a run of zero-width bytes.
        decoded_escape: Character the shell decodes in command substitution
            output, doubled to print it literally. Empty when none is decoded.
        literal_escape: Character the shell decodes in the prompt string
            itself before running command substitutions.
    """

    shell: Shell
    timestamp: str
    user: str
    host: str
    directory: str
    prompt_glyph: str
    nonprinting_start: str
    nonprinting_end: str
    decoded_escape: str
    literal_escape: str

    def timestamp_placeholder(self, timestamp_format: str) -> str:
        return self.timestamp.format(timestamp_format)

    def hide(self, sequence: str) -> str:
        """Wrap zero-width bytes in the non-printing markers."""
        return f"{self.nonprinting_start}{sequence}{self.nonprinting_end}"

    def escape_output(self, text: str) -> str:
        """Escape command substitution output the shell would decode."""
        if not self.decoded_escape:
            return text
        return text.replace(self.decoded_escape, self.decoded_escape * 2)

    def command_substitution(self, command: str) -> str:
        """Embed a command whose output is substituted at display time."""
        if self.literal_escape:
            escape = self.literal_escape
            command = command.replace(escape, escape * 2)
        return f"$({command})"


SYNTAXES: Mapping[Shell, ShellSyntax] = MappingProxyType(
    {
        # bash decodes backslash escapes before expanding $(...), so
        # substituted output is never decoded again.
        Shell.BASH: ShellSyntax(
            shell=Shell.BASH,
            timestamp="\\D{{{}}}",
            user="\\u",
            host="\\h",
            directory="\\w",
            prompt_glyph="\\$",
            nonprinting_start="\\[",
            nonprinting_end="\\]",
            decoded_escape="",
            literal_escape="\\",
        ),
        # zsh runs prompt escapes after PROMPT_SUBST substitution, so "%" in
        # substituted output must be doubled, but not inside the command.
        Shell.ZSH: ShellSyntax(
            shell=Shell.ZSH,
            timestamp="%D{{{}}}",
            user="%n",
            host="%m",
            directory="%~",
            prompt_glyph="%#",
            nonprinting_start="%{",
            nonprinting_end="%}",
            decoded_escape="%",
            literal_escape="",
        ),
    }
)


def get_syntax(shell: Shell) -> ShellSyntax:
    return SYNTAXES[shell]


def parse_shell(name: str) -> Shell:
    """Parse a shell name or path such as ``zsh`` or ``/bin/bash``.

    Raises:
        UnsupportedShellError: If the shell has no prompt syntax available.
    """
    shell_name = Path(name.strip()).name.lower()
    try:
        return Shell(shell_name)
    except ValueError as e:
        supported = ", ".join(s.value for s in Shell)
        msg = f"Unsupported shell '{name}' (supported: {supported})"
        raise UnsupportedShellError(msg, shell=name) from e


def detect_shell(
    configured: str | None = None,
    environ: Mapping[str, str] | None = None,
) -> Shell:
    """Determine which shell to emit syntax for.

    An explicitly configured shell wins and must be supported. Otherwise
    ``$SHELL`` is used when it names a supported shell, falling back to bash.

    Raises:
        UnsupportedShellError: If ``configured`` names an unsupported shell.
    """
    if configured:
        return parse_shell(configured)

    env = os_environ if environ is None else environ
    login_shell = env.get("SHELL", "")
    if login_shell:
        try:
            return parse_shell(login_shell)
        except UnsupportedShellError:
            pass
    return Shell.BASH
