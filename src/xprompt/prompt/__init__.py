"""Prompt rendering for xprompt.

Builds the strings printed for each mode: prompt templates for the shell's
prompt variables, the git status segment, the shell integration snippet and
a fully expanded preview.
"""

from ._assembler import (
    CONTINUATION_GLYPH,
    DEFAULT_TIMESTAMP_FORMAT,
    PromptAssembler,
    context_spans,
    render_continuation,
    render_preview,
    render_primary,
    render_status,
    status_spans,
)
from ._environment import (
    PromptEnvironment,
    collect_environment,
    get_current_dir,
    get_relative_dir,
)
from ._executable import DEFAULT_EXECUTABLE, resolve_executable
from ._init import render_init
from ._palette import PALETTE, Color, control_sequences, paint, style_for
from ._shells import SYNTAXES, ShellSyntax, detect_shell, get_syntax, parse_shell
from ._spans import StyledSpan, format_plain_spans, format_prompt_spans

__all__ = [
    "CONTINUATION_GLYPH",
    "DEFAULT_EXECUTABLE",
    "DEFAULT_TIMESTAMP_FORMAT",
    "PALETTE",
    "SYNTAXES",
    "Color",
    "PromptAssembler",
    "PromptEnvironment",
    "ShellSyntax",
    "StyledSpan",
    "collect_environment",
    "context_spans",
    "control_sequences",
    "detect_shell",
    "format_plain_spans",
    "format_prompt_spans",
    "get_current_dir",
    "get_relative_dir",
    "get_syntax",
    "paint",
    "parse_shell",
    "render_continuation",
    "render_init",
    "render_preview",
    "render_primary",
    "render_status",
    "resolve_executable",
    "status_spans",
    "style_for",
]
