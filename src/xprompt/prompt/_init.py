"""Shell integration snippets printed by ``xprompt --init``."""

import shlex

from xprompt.enums import Shell

_BASH_TEMPLATE = """\
# xprompt integration for bash. Add to ~/.bashrc:
#   eval "$({init})"
PS1="$({ps1})"
PS2="$({ps2})"
"""

_ZSH_TEMPLATE = """\
# xprompt integration for zsh. Add to ~/.zshrc:
#   eval "$({init})"
setopt PROMPT_SUBST
PROMPT="$({ps1})"
PROMPT2="$({ps2})"
"""

_TEMPLATES = {
    Shell.BASH: _BASH_TEMPLATE,
    Shell.ZSH: _ZSH_TEMPLATE,
}


def render_init(shell: Shell, executable: str, *, color: bool = True) -> str:
    """Render the snippet that installs xprompt as the shell's prompt.

    Args:
        shell: Shell to wire the prompt into.
        executable: Command used to invoke xprompt.
        color: Whether the installed prompt is colored.
    """
    common = ["--shell", shell.value]
    if not color:
        common.append("--no-color")

    def command(*args: str) -> str:
        return shlex.join([executable, *args, *common])

    return _TEMPLATES[shell].format(
        init=command("--init"),
        ps1=command("--ps1", "--executable", executable),
        ps2=command("--ps2"),
    )
