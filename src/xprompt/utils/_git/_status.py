# pyright: reportUnknownMemberType=false, reportUnknownVariableType=false, reportUnknownArgumentType=false
"""Git status inspection.

This module discovers the repository enclosing a directory and summarizes
its state as a branch label plus a set of StatusFlag values, using dulwich.
Every facet is queried independently: a failing status query never hides
the branch label, and a failing stash lookup never hides the status flags.
"""

import os
from collections.abc import Iterable
from pathlib import Path
from typing import TYPE_CHECKING

from dulwich import porcelain
from dulwich.reflog import read_reflog
from dulwich.repo import Repo
from dulwich.stash import DEFAULT_STASH_REF

from xprompt.utils._git._common import (
    decode_path,
    discover_repo,
    get_worktree_dir,
    short_branch_name,
)
from xprompt.utils._git._models import FileStatus, StatusFlag, StatusSummary
from xprompt.utils._logging import create_null_logger

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

_WORKING_TREE_CHANGES = (
    FileStatus.WT_DELETED
    | FileStatus.WT_MODIFIED
    | FileStatus.WT_RENAMED
    | FileStatus.WT_TYPECHANGE
)

_INDEX_CHANGES = (
    FileStatus.INDEX_DELETED
    | FileStatus.INDEX_MODIFIED
    | FileStatus.INDEX_NEW
    | FileStatus.INDEX_RENAMED
    | FileStatus.INDEX_TYPECHANGE
)

# Keys of porcelain.GitStatus.staged
_STAGED_CHANGES = {
    "add": FileStatus.INDEX_NEW,
    "delete": FileStatus.INDEX_DELETED,
    "modify": FileStatus.INDEX_MODIFIED,
}


def is_unversioned(status: FileStatus) -> bool:
    return bool(status & FileStatus.WT_NEW)


def is_working_tree_modified(status: FileStatus) -> bool:
    return bool(status & _WORKING_TREE_CHANGES)


def is_index_modified(status: FileStatus) -> bool:
    return bool(status & _INDEX_CHANGES)


def classify(statuses: Iterable[FileStatus]) -> frozenset[StatusFlag]:
    """Classify file statuses into repository flags.

    Every entry is checked against all three predicates, so one file can
    contribute several flags (e.g. staged and then edited again).

    Args:
        statuses: Per-file statuses.

    Returns:
        The accumulated flags. Never contains StatusFlag.STASHED.
    """
    flags: set[StatusFlag] = set()
    for status in statuses:
        if is_unversioned(status):
            flags.add(StatusFlag.UNVERSIONED)
        if is_working_tree_modified(status):
            flags.add(StatusFlag.MODIFIED)
        if is_index_modified(status):
            flags.add(StatusFlag.ADDED)
    return frozenset(flags)


def collect_file_statuses(
    status: porcelain.GitStatus, worktree_dir: Path
) -> dict[str, FileStatus]:
    """Merge a porcelain status report into one FileStatus per path.

    Args:
        status: GitStatus from porcelain.status().
        worktree_dir: Working tree root, used to tell unstaged deletions
            from unstaged edits.

    Returns:
        Mapping of repository-relative path to its combined status.
    """
    entries: dict[str, FileStatus] = {}

    staged = status.staged
    for change_type, flag in _STAGED_CHANGES.items():
        for path in staged.get(change_type, []):
            key = decode_path(path)
            entries[key] = entries.get(key, FileStatus.CURRENT) | flag

    for path in status.unstaged:
        key = decode_path(path)
        flag = (
            FileStatus.WT_MODIFIED
            if os.path.lexists(worktree_dir / key)
            else FileStatus.WT_DELETED
        )
        entries[key] = entries.get(key, FileStatus.CURRENT) | flag

    for path in status.untracked:
        key = decode_path(path)
        entries[key] = entries.get(key, FileStatus.CURRENT) | FileStatus.WT_NEW

    return entries


def get_branch_label(repo: Repo) -> str | None:
    """Resolve the label for the checked-out reference.

    Returns:
        The short branch name when HEAD points at a branch, the full hex
        commit id when HEAD is detached, or None when HEAD does not resolve
        to a commit (e.g. a branch with no commits yet).
    """
    try:
        head_sha = repo.head()
    except KeyError:
        return None

    head_ref = repo.refs.get_symrefs().get(b"HEAD")
    branch = None if head_ref is None else short_branch_name(head_ref)
    return branch if branch is not None else head_sha.decode("ascii")


def get_status_flags(repo: Repo) -> frozenset[StatusFlag]:
    """Classify the working tree and index of a repository."""
    status = porcelain.status(repo)
    entries = collect_file_statuses(status, get_worktree_dir(repo))
    return classify(entries.values())


def has_stash(repo: Repo) -> bool:
    """Check whether the repository has at least one stash entry.

    Only the first line of the stash reflog is read.
    """
    reflog_path = Path(repo.commondir(), "logs", os.fsdecode(DEFAULT_STASH_REF))
    try:
        with reflog_path.open("rb") as f:
            return next(read_reflog(f), None) is not None
    except FileNotFoundError:
        return False


def inspect(
    start_path: Path | str,
    *,
    logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
) -> StatusSummary | None:
    """Summarize the git repository enclosing a directory.

    Args:
        start_path: Directory to start repository discovery from.
        logger: Logger for degraded queries. Defaults to a discarding logger.

    Returns:
        StatusSummary for the repository, or None when no repository
        encloses ``start_path`` or its HEAD cannot be resolved.
    """
    log = logger if logger is not None else create_null_logger()

    try:
        repo = discover_repo(start_path)
    except Exception:  # noqa: BLE001 - A broken repository renders as no repository
        log.debug("git_discovery_failed", path=str(start_path), exc_info=True)
        return None

    if repo is None:
        return None

    try:
        try:
            branch = get_branch_label(repo)
        except Exception:  # noqa: BLE001
            log.debug("git_head_failed", path=str(start_path), exc_info=True)
            branch = None

        if branch is None:
            return None

        flags: set[StatusFlag] = set()

        try:
            flags.update(get_status_flags(repo))
        except Exception:  # noqa: BLE001
            log.debug("git_status_failed", path=str(start_path), exc_info=True)

        try:
            if has_stash(repo):
                flags.add(StatusFlag.STASHED)
        except Exception:  # noqa: BLE001
            log.debug("git_stash_failed", path=str(start_path), exc_info=True)

        return StatusSummary(branch=branch, flags=frozenset(flags))
    finally:
        repo.close()
