"""Enumeration types for xprompt."""

from enum import StrEnum


class Mode(StrEnum):
    """Output modes selected on the command line."""

    PRIMARY = "ps1"
    CONTINUATION = "ps2"
    STATUS = "status"
    INIT = "init"
    PREVIEW = "preview"


class Shell(StrEnum):
    """Shells whose prompt syntax xprompt can emit."""

    BASH = "bash"
    ZSH = "zsh"
