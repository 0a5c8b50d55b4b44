"""Shared test fixtures for xprompt tests."""

import os
from dataclasses import dataclass
from pathlib import Path

import pytest
from dulwich import porcelain
from dulwich.repo import Repo
from rich.console import Console

AUTHOR = b"Test User <test@example.com>"


@dataclass(frozen=True, slots=True)
class GitRepo:
    """A real repository in a temporary directory, driven through dulwich."""

    root: Path

    @property
    def git_dir(self) -> Path:
        return self.root / ".git"

    def write(self, name: str, content: str = "content\n") -> Path:
        path = self.root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    def stage(self, *names: str) -> None:
        porcelain.add(str(self.root), paths=[str(self.root / name) for name in names])

    def commit(self, message: str = "commit") -> str:
        sha = porcelain.commit(
            str(self.root),
            message=message.encode(),
            author=AUTHOR,
            committer=AUTHOR,
        )
        return sha.decode()

    def commit_file(self, name: str, content: str = "content\n") -> str:
        self.write(name, content)
        self.stage(name)
        return self.commit(f"add {name}")

    def detach(self, sha: str) -> None:
        """Point HEAD directly at a commit, as `git checkout <sha>` does."""
        (self.git_dir / "HEAD").write_text(f"{sha}\n")

    def add_stash_entry(self, sha: str) -> None:
        """Record a stash entry the way git does: a ref plus its reflog."""
        (self.git_dir / "refs" / "stash").write_text(f"{sha}\n")
        reflog = self.git_dir / "logs" / "refs" / "stash"
        reflog.parent.mkdir(parents=True, exist_ok=True)
        with reflog.open("a") as f:
            f.write(
                f"{'0' * 40} {sha} {AUTHOR.decode()} 1700000000 +0000\t"
                "WIP on main: test\n"
            )


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep user config, logs and color settings out of tests."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg_config"))
    monkeypatch.setenv("XDG_STATE_HOME", str(tmp_path / "xdg_state"))
    monkeypatch.delenv("NO_COLOR", raising=False)
    for name in list(os.environ):
        if name.startswith("XPROMPT_"):
            monkeypatch.delenv(name)


@pytest.fixture
def git_repo(tmp_path: Path) -> GitRepo:
    """Create an empty repository whose HEAD points at an unborn `main`."""
    root = tmp_path / "repo"
    root.mkdir()
    repo = Repo.init(str(root))
    repo.refs.set_symbolic_ref(b"HEAD", b"refs/heads/main")
    repo.close()
    return GitRepo(root=root)


@pytest.fixture
def committed_repo(git_repo: GitRepo) -> GitRepo:
    """Repository on `main` with one committed file, `tracked.txt`."""
    git_repo.commit_file("tracked.txt")
    return git_repo


@pytest.fixture
def console() -> Console:
    return Console(
        width=70,
        force_terminal=True,
        highlight=False,
        color_system=None,
        legacy_windows=False,
    )
