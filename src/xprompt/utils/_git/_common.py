"""Repository discovery and name decoding shared by the status inspector."""

import os
from pathlib import Path

from dulwich.errors import NotGitRepository
from dulwich.repo import Repo

BRANCH_REF_PREFIX = b"refs/heads/"


def discover_repo(start_path: Path | str) -> Repo | None:
    """Open the repository enclosing ``start_path``, searching upward.

    Returns:
        The repository, or None when no parent directory is one.
    """
    try:
        return Repo.discover(os.fspath(start_path))
    except NotGitRepository:
        return None


def get_worktree_dir(repo: Repo) -> Path:
    """Return the working tree root (dulwich's ``Repo.path``)."""
    return Path(os.fsdecode(repo.path))


def decode_path(path: bytes | str) -> str:
    """Decode a repository-relative path reported by dulwich."""
    return os.fsdecode(path)


def short_branch_name(ref: bytes) -> str | None:
    """Return ``name`` for ``refs/heads/<name>``, or None for any other ref.

    Example:
        >>> short_branch_name(b"refs/heads/feature/login")
        'feature/login'
    """
    if not ref.startswith(BRANCH_REF_PREFIX):
        return None
    return ref.removeprefix(BRANCH_REF_PREFIX).decode(errors="replace")
