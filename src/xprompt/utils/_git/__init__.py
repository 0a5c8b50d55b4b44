"""Git utilities for xprompt.

This package provides repository discovery and status inspection for the
prompt's version-control segment.
"""

from xprompt.utils._git._common import (
    decode_path,
    discover_repo,
    get_worktree_dir,
    short_branch_name,
)
from xprompt.utils._git._models import (
    FileStatus,
    StatusFlag,
    StatusSummary,
    sorted_flags,
)
from xprompt.utils._git._status import (
    classify,
    collect_file_statuses,
    get_branch_label,
    get_status_flags,
    has_stash,
    inspect,
    is_index_modified,
    is_unversioned,
    is_working_tree_modified,
)

__all__ = [
    "FileStatus",
    "StatusFlag",
    "StatusSummary",
    "classify",
    "collect_file_statuses",
    "decode_path",
    "discover_repo",
    "get_branch_label",
    "get_status_flags",
    "get_worktree_dir",
    "has_stash",
    "inspect",
    "is_index_modified",
    "is_unversioned",
    "is_working_tree_modified",
    "short_branch_name",
    "sorted_flags",
]
