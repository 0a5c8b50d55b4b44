# pyright: reportAny=false, reportExplicitAny=false, reportUnknownArgumentType=false, reportUnknownMemberType=false, reportUnknownVariableType=false
"""Validation of merged configuration data against the section models."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import BaseModel, ConfigDict, ValidationError

from xprompt.config._models._logging import LoggingConfig
from xprompt.config._models._prompt import PromptConfig
from xprompt.exceptions import ConfigValidationError

if TYPE_CHECKING:
    from pydantic_core import ErrorDetails


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """A single invalid value.

    Attributes:
        key: Dotted path of the value, e.g. ``"logging.level"``.
        message: What is wrong with it.
        expected: Accepted values, when pydantic reports them.
        actual: The rejected value.
    """

    key: str
    message: str
    expected: str | None
    actual: Any


class ConfigSchema(BaseModel):
    model_config: ClassVar[ConfigDict] = ConfigDict(extra="ignore")

    logging: LoggingConfig = LoggingConfig()
    prompt: PromptConfig = PromptConfig()


def _to_issue(error: "ErrorDetails") -> ValidationIssue:  # noqa: UP037
    ctx = error.get("ctx") or {}
    expected = ctx.get("expected")
    return ValidationIssue(
        key=".".join(str(part) for part in error["loc"]),
        message=error["msg"],
        expected=None if expected is None else str(expected),
        actual=error.get("input"),
    )


def validate_config(config: dict[str, Any]) -> list[ValidationIssue]:
    """Check merged configuration data; an empty list means it is valid."""
    try:
        _ = ConfigSchema.model_validate(config)
    except ValidationError as e:
        return [_to_issue(error) for error in e.errors()]
    return []


def raise_if_validation_errors(
    issues: list[ValidationIssue],
    source: str | None = None,
) -> None:
    """Raise ConfigValidationError describing the first issue, if any.

    Raises:
        ConfigValidationError: If ``issues`` is not empty.
    """
    if not issues:
        return
    first = issues[0]
    msg = f"Invalid value {first.actual!r} for '{first.key}': {first.message}"
    raise ConfigValidationError(
        msg,
        key=first.key,
        value=first.actual,
        expected=first.expected or first.message,
        source=source,
    )
