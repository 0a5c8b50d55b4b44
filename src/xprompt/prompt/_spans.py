"""Styled spans and the two ways of formatting them.

Spans embedded in a prompt variable are re-parsed by the shell's line
editor, which must be told that the escape sequences take no columns. Spans
printed for command substitution are captured as inert text and carry no
markers.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from xprompt.prompt._palette import Color, control_sequences, paint
from xprompt.prompt._shells import ShellSyntax


@dataclass(frozen=True, slots=True)
class StyledSpan:
    """Display text paired with the color it is painted in."""

    text: str
    color: Color


def format_prompt_spans(
    spans: Iterable[StyledSpan],
    syntax: ShellSyntax,
    *,
    color: bool = True,
) -> str:
    """Format spans for a prompt variable.

    Every start and reset sequence is enclosed in the shell's non-printing
    markers, so the line editor's width calculation skips them.
    """
    parts: list[str] = []
    for span in spans:
        if not span.text:
            continue
        if not color:
            parts.append(span.text)
            continue
        start, reset = control_sequences(span.color)
        parts.append(
            f"{syntax.hide(start)}{span.text}{syntax.hide(reset)}"
        )
    return "".join(parts)


def format_plain_spans(spans: Iterable[StyledSpan], *, color: bool = True) -> str:
    """Format spans as plain terminal output, with no non-printing markers."""
    if not color:
        return "".join(span.text for span in spans)
    return "".join(paint(span.text, span.color) for span in spans)
