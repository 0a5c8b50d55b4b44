"""Prompt configuration model."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class PromptConfig(BaseModel):
    """Prompt rendering section.

    Attributes:
        shell: Shell to emit syntax for (empty detects it from ``$SHELL``).
        executable: Command used to re-invoke xprompt from inside a prompt
            (empty detects the running executable).
        no_color: Render without terminal styling.
        timestamp_format: strftime format used for timestamps.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    shell: str = ""
    executable: str = ""
    no_color: bool = False
    timestamp_format: str = "%Y-%m-%dT%H:%M:%S"
