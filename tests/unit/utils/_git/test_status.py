# pyright: reportAny=false
"""Unit tests for git status classification and inspection."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest
from dulwich import porcelain

from xprompt.utils._git import (
    FileStatus,
    StatusFlag,
    StatusSummary,
    classify,
    collect_file_statuses,
    get_branch_label,
    has_stash,
    inspect,
    is_index_modified,
    is_unversioned,
    is_working_tree_modified,
    sorted_flags,
)

if TYPE_CHECKING:
    from pytest_mock import MockerFixture

HEAD_SHA = "0123456789abcdef0123456789abcdef01234567"


def _git_status(
    *,
    add: list[bytes] | None = None,
    delete: list[bytes] | None = None,
    modify: list[bytes] | None = None,
    unstaged: list[bytes] | None = None,
    untracked: list[str] | None = None,
) -> porcelain.GitStatus:
    return porcelain.GitStatus(
        staged={"add": add or [], "delete": delete or [], "modify": modify or []},
        unstaged=unstaged or [],
        untracked=untracked or [],
    )


def _mock_repo(
    *, head: bytes | Exception = HEAD_SHA.encode(), symref: bytes | None = b"refs/heads/main"
) -> MagicMock:
    repo = MagicMock()
    if isinstance(head, Exception):
        repo.head.side_effect = head
    else:
        repo.head.return_value = head
    repo.refs.get_symrefs.return_value = {} if symref is None else {b"HEAD": symref}
    return repo


class TestPredicates:
    def test_untracked_is_unversioned(self) -> None:
        assert is_unversioned(FileStatus.WT_NEW)
        assert not is_unversioned(FileStatus.WT_MODIFIED)

    @pytest.mark.parametrize(
        "status",
        [
            FileStatus.WT_DELETED,
            FileStatus.WT_MODIFIED,
            FileStatus.WT_RENAMED,
            FileStatus.WT_TYPECHANGE,
        ],
    )
    def test_working_tree_changes(self, status: FileStatus) -> None:
        assert is_working_tree_modified(status)
        assert not is_index_modified(status)

    @pytest.mark.parametrize(
        "status",
        [
            FileStatus.INDEX_DELETED,
            FileStatus.INDEX_MODIFIED,
            FileStatus.INDEX_NEW,
            FileStatus.INDEX_RENAMED,
            FileStatus.INDEX_TYPECHANGE,
        ],
    )
    def test_index_changes(self, status: FileStatus) -> None:
        assert is_index_modified(status)
        assert not is_working_tree_modified(status)

    def test_new_file_is_not_a_working_tree_modification(self) -> None:
        assert not is_working_tree_modified(FileStatus.WT_NEW)

    def test_current_matches_nothing(self) -> None:
        assert not is_unversioned(FileStatus.CURRENT)
        assert not is_working_tree_modified(FileStatus.CURRENT)
        assert not is_index_modified(FileStatus.CURRENT)


class TestClassify:
    def test_empty(self) -> None:
        assert classify([]) == frozenset()

    def test_single_entry_can_contribute_two_flags(self) -> None:
        flags = classify([FileStatus.INDEX_NEW | FileStatus.WT_MODIFIED])

        assert flags == {StatusFlag.MODIFIED, StatusFlag.ADDED}

    def test_scans_every_entry(self) -> None:
        flags = classify(
            [FileStatus.WT_NEW, FileStatus.CURRENT, FileStatus.INDEX_DELETED]
        )

        assert flags == {StatusFlag.UNVERSIONED, StatusFlag.ADDED}

    def test_never_reports_stash(self) -> None:
        assert StatusFlag.STASHED not in classify(list(FileStatus))


class TestCollectFileStatuses:
    def test_maps_staged_changes_to_index_states(self, tmp_path: Path) -> None:
        status = _git_status(add=[b"a.txt"], delete=[b"b.txt"], modify=[b"c.txt"])

        entries = collect_file_statuses(status, tmp_path)

        assert entries == {
            "a.txt": FileStatus.INDEX_NEW,
            "b.txt": FileStatus.INDEX_DELETED,
            "c.txt": FileStatus.INDEX_MODIFIED,
        }

    def test_unstaged_file_present_is_modified(self, tmp_path: Path) -> None:
        (tmp_path / "edited.txt").write_text("edited\n")

        entries = collect_file_statuses(_git_status(unstaged=[b"edited.txt"]), tmp_path)

        assert entries == {"edited.txt": FileStatus.WT_MODIFIED}

    def test_unstaged_file_missing_is_deleted(self, tmp_path: Path) -> None:
        entries = collect_file_statuses(_git_status(unstaged=[b"gone.txt"]), tmp_path)

        assert entries == {"gone.txt": FileStatus.WT_DELETED}

    def test_untracked_is_new(self, tmp_path: Path) -> None:
        entries = collect_file_statuses(_git_status(untracked=["new.txt"]), tmp_path)

        assert entries == {"new.txt": FileStatus.WT_NEW}

    def test_combines_states_for_the_same_path(self, tmp_path: Path) -> None:
        (tmp_path / "both.txt").write_text("edited again\n")
        status = _git_status(add=[b"both.txt"], unstaged=[b"both.txt"])

        entries = collect_file_statuses(status, tmp_path)

        assert entries == {"both.txt": FileStatus.INDEX_NEW | FileStatus.WT_MODIFIED}


class TestGetBranchLabel:
    def test_named_branch_returns_short_name(self) -> None:
        repo = _mock_repo(symref=b"refs/heads/feature/login")

        assert get_branch_label(repo) == "feature/login"

    def test_detached_head_returns_full_commit_id(self) -> None:
        repo = _mock_repo(symref=None)

        assert get_branch_label(repo) == HEAD_SHA

    def test_unborn_branch_returns_none(self) -> None:
        repo = _mock_repo(head=KeyError(b"HEAD"))

        assert get_branch_label(repo) is None


class TestHasStash:
    STASH_LINE = (
        f"{'0' * 40} {HEAD_SHA} Test User <test@example.com> 1700000000 +0000\t"
        "WIP on main: test\n"
    )

    def _repo_with_reflog(self, tmp_path: Path, content: str | None) -> MagicMock:
        if content is not None:
            reflog = tmp_path / "logs" / "refs" / "stash"
            reflog.parent.mkdir(parents=True)
            _ = reflog.write_text(content)
        repo = MagicMock()
        repo.commondir.return_value = str(tmp_path)
        return repo

    def test_missing_reflog(self, tmp_path: Path) -> None:
        assert has_stash(self._repo_with_reflog(tmp_path, None)) is False

    def test_empty_reflog(self, tmp_path: Path) -> None:
        assert has_stash(self._repo_with_reflog(tmp_path, "")) is False

    def test_one_entry(self, tmp_path: Path) -> None:
        assert has_stash(self._repo_with_reflog(tmp_path, self.STASH_LINE)) is True

    def test_reads_only_first_entry(self, tmp_path: Path) -> None:
        content = self.STASH_LINE + "not a reflog line\n"
        repo = self._repo_with_reflog(tmp_path, content)

        assert has_stash(repo) is True


class TestInspect:
    def test_returns_none_outside_repository(self, mocker: MockerFixture) -> None:
        mocker.patch("xprompt.utils._git._status.discover_repo", return_value=None)

        assert inspect("/nowhere") is None

    def test_returns_none_when_discovery_fails(self, mocker: MockerFixture) -> None:
        mocker.patch(
            "xprompt.utils._git._status.discover_repo",
            side_effect=PermissionError("denied"),
        )

        assert inspect("/locked") is None

    def test_returns_none_without_resolvable_head(self, mocker: MockerFixture) -> None:
        repo = _mock_repo(head=KeyError(b"HEAD"))
        mocker.patch("xprompt.utils._git._status.discover_repo", return_value=repo)
        status = mocker.patch("xprompt.utils._git._status.get_status_flags")

        assert inspect("/repo") is None
        status.assert_not_called()
        repo.close.assert_called_once()

    def test_combines_status_and_stash(self, mocker: MockerFixture) -> None:
        repo = _mock_repo()
        mocker.patch("xprompt.utils._git._status.discover_repo", return_value=repo)
        mocker.patch(
            "xprompt.utils._git._status.get_status_flags",
            return_value=frozenset({StatusFlag.ADDED}),
        )
        mocker.patch("xprompt.utils._git._status.has_stash", return_value=True)

        summary = inspect("/repo")

        assert summary == StatusSummary(
            branch="main", flags=frozenset({StatusFlag.ADDED, StatusFlag.STASHED})
        )
        repo.close.assert_called_once()

    def test_failed_status_keeps_branch_and_stash(self, mocker: MockerFixture) -> None:
        repo = _mock_repo()
        mocker.patch("xprompt.utils._git._status.discover_repo", return_value=repo)
        mocker.patch(
            "xprompt.utils._git._status.get_status_flags",
            side_effect=OSError("index.lock"),
        )
        mocker.patch("xprompt.utils._git._status.has_stash", return_value=True)

        summary = inspect("/repo")

        assert summary == StatusSummary(
            branch="main", flags=frozenset({StatusFlag.STASHED})
        )

    def test_failed_stash_keeps_status(self, mocker: MockerFixture) -> None:
        repo = _mock_repo()
        mocker.patch("xprompt.utils._git._status.discover_repo", return_value=repo)
        mocker.patch(
            "xprompt.utils._git._status.get_status_flags",
            return_value=frozenset({StatusFlag.UNVERSIONED}),
        )
        mocker.patch(
            "xprompt.utils._git._status.has_stash", side_effect=ValueError("bad reflog")
        )

        summary = inspect("/repo")

        assert summary == StatusSummary(
            branch="main", flags=frozenset({StatusFlag.UNVERSIONED})
        )

    def test_logs_degraded_queries(self, mocker: MockerFixture) -> None:
        repo = _mock_repo()
        mocker.patch("xprompt.utils._git._status.discover_repo", return_value=repo)
        mocker.patch(
            "xprompt.utils._git._status.get_status_flags",
            side_effect=OSError("index.lock"),
        )
        mocker.patch("xprompt.utils._git._status.has_stash", return_value=False)
        logger = MagicMock()

        _ = inspect("/repo", logger=logger)

        logger.debug.assert_called_once_with(
            "git_status_failed", path="/repo", exc_info=True
        )


class TestStatusSummary:
    def test_glyphs_follow_declaration_order(self) -> None:
        summary = StatusSummary(
            branch="main",
            flags=frozenset({StatusFlag.STASHED, StatusFlag.UNVERSIONED, StatusFlag.ADDED}),
        )

        assert summary.glyphs == "?+$"

    def test_sorted_flags_deduplicates(self) -> None:
        flags = [StatusFlag.ADDED, StatusFlag.MODIFIED, StatusFlag.ADDED]

        assert sorted_flags(flags) == (StatusFlag.MODIFIED, StatusFlag.ADDED)

    def test_flag_glyphs(self) -> None:
        assert [flag.glyph for flag in StatusFlag] == ["?", "!", "+", "$"]
