"""Git status types.

StatusFlag is the display-level summary of a repository; FileStatus is the
per-entry state the flags are classified from.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum, IntFlag


class StatusFlag(Enum):
    """Repository state flags, declared in display order.

    Each value is the single-character glyph shown in the prompt.
    """

    UNVERSIONED = "?"
    MODIFIED = "!"
    ADDED = "+"
    STASHED = "$"

    @property
    def glyph(self) -> str:
        return self.value


def sorted_flags(flags: Iterable[StatusFlag]) -> tuple[StatusFlag, ...]:
    """Return flags in canonical display order, without duplicates."""
    present = set(flags)
    return tuple(flag for flag in StatusFlag if flag in present)


class FileStatus(IntFlag):
    """State of a single file relative to HEAD, the index and the working tree."""

    CURRENT = 0
    INDEX_NEW = 1 << 0
    INDEX_MODIFIED = 1 << 1
    INDEX_DELETED = 1 << 2
    INDEX_RENAMED = 1 << 3
    INDEX_TYPECHANGE = 1 << 4
    WT_NEW = 1 << 7
    WT_MODIFIED = 1 << 8
    WT_DELETED = 1 << 9
    WT_TYPECHANGE = 1 << 10
    WT_RENAMED = 1 << 11


@dataclass(frozen=True, slots=True)
class StatusSummary:
    """Branch label and status flags for a discovered repository.

    Attributes:
        branch: Short branch name, or the full hex commit id when HEAD is
            detached.
        flags: Status flags present in the repository.
    """

    branch: str
    flags: frozenset[StatusFlag] = field(default_factory=frozenset)

    @property
    def ordered_flags(self) -> tuple[StatusFlag, ...]:
        return sorted_flags(self.flags)

    @property
    def glyphs(self) -> str:
        """Concatenated flag glyphs in display order, e.g. ``"?!+"``."""
        return "".join(flag.glyph for flag in self.ordered_flags)
