"""Shared pytest fixtures and test doubles for prflow tests."""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from prflow.config.settings import PrflowSettings
from prflow.domain.branches import MERGE_CONFLICT_SUFFIX
from prflow.domain.repository import RepositoryUrl

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git not installed")


class FakeRunner:
    """Records git invocations instead of running them."""

    def __init__(self, remote_branches: list[str] | None = None) -> None:
        self.calls: list[tuple[str, ...]] = []
        self.remote_branches = remote_branches or []
        self.remote_checks: list[str] = []

    def run(self, *args: str) -> None:
        self.calls.append(args)

    def remote_heads(self, remote: str) -> list[str]:
        self.remote_checks.append(remote)
        return list(self.remote_branches)


class FakeLauncher:
    """Records pull-request launches; returns the compare URL."""

    def __init__(self, repository: RepositoryUrl) -> None:
        self.repository = repository
        self.launched: list[tuple[str, str, bool]] = []

    def launch(self, source: str, target: str, *, expect_conflict: bool = False) -> str:
        self.launched.append((source, target, expect_conflict))
        return self.repository.compare_url(source, target)


class MergingLauncher:
    """Completes pull requests on a bare remote the way a reviewer would.

    Merges happen in a scratch clone and are pushed back. A PR flagged as
    conflicting is checked to really conflict and is left open. A
    ``-merge-conflict`` branch first takes its target with README sections
    kept from both sides, then merges cleanly.
    """

    def __init__(self, repository: RepositoryUrl, remote: Path, scratch: Path) -> None:
        self.repository = repository
        self.remote = remote
        self.scratch = scratch
        self.merged: list[tuple[str, str]] = []
        self.conflicts: list[tuple[str, str]] = []

    def launch(self, source: str, target: str, *, expect_conflict: bool = False) -> str:
        self._sync()
        if expect_conflict:
            self._check_conflict(source, target)
            self.conflicts.append((source, target))
        else:
            if source.endswith(MERGE_CONFLICT_SUFFIX):
                self._resolve(source, target)
            self._merge(source, target)
            self.merged.append((source, target))
        return self.repository.compare_url(source, target)

    def _sync(self) -> None:
        if (self.scratch / ".git").is_dir():
            git(self.scratch, "fetch", "--prune", "origin")
        else:
            git(self.scratch.parent, "clone", str(self.remote), str(self.scratch))

    def _check_conflict(self, source: str, target: str) -> None:
        git(self.scratch, "checkout", "-B", target, f"origin/{target}")
        attempt = git(self.scratch, "merge", "--no-commit", "--no-ff", f"origin/{source}", check=False)
        assert attempt.returncode != 0, f"{source} -> {target} merged cleanly"
        assert "CONFLICT" in attempt.stdout
        git(self.scratch, "merge", "--abort")

    def _resolve(self, source: str, target: str) -> None:
        attributes = self.scratch / ".git" / "info" / "attributes"
        attributes.parent.mkdir(exist_ok=True)
        attributes.write_text("*.md merge=union\n", encoding="utf-8")
        try:
            git(self.scratch, "checkout", "-B", source, f"origin/{source}")
            git(self.scratch, "merge", "--no-edit", f"origin/{target}")
        finally:
            attributes.unlink()
        git(self.scratch, "push", "origin", f"HEAD:refs/heads/{source}")
        git(self.scratch, "fetch", "origin")

    def _merge(self, source: str, target: str) -> None:
        git(self.scratch, "checkout", "-B", target, f"origin/{target}")
        git(self.scratch, "merge", "--no-ff", "--no-edit", f"origin/{source}")
        git(self.scratch, "push", "origin", f"HEAD:refs/heads/{target}")


class Recorder:
    """Callable collecting echo/pause messages."""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def __call__(self, message: Any = "", **_kwargs: Any) -> None:
        self.messages.append(str(message))


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo the handler swap the root CLI group performs on every invocation."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's PRFLOW_* environment out of the tests."""
    monkeypatch.delenv("PRFLOW_CONFIG", raising=False)
    monkeypatch.delenv("PRFLOW_WORKDIR", raising=False)


@pytest.fixture
def repository() -> RepositoryUrl:
    return RepositoryUrl.parse("https://github.com/acme/pr-demo")


@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    path = tmp_path / "demo"
    path.mkdir()
    return path


@pytest.fixture
def settings(workdir: Path) -> PrflowSettings:
    return PrflowSettings.from_cli(workdir=workdir)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def fake_launcher(repository: RepositoryUrl) -> FakeLauncher:
    return FakeLauncher(repository)


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


# ---------------------------------------------------------------------------
# Real git helpers
# ---------------------------------------------------------------------------


@pytest.fixture
def git_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Isolate git from the user's config and give it an identity."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(home / ".gitconfig"))
    for role in ("AUTHOR", "COMMITTER"):
        monkeypatch.setenv(f"GIT_{role}_NAME", "Test")
        monkeypatch.setenv(f"GIT_{role}_EMAIL", "test@test.com")


def git(cwd: Path, *args: str, check: bool = True) -> subprocess.CompletedProcess[str]:
    """Run git in *cwd* with captured text output."""
    return subprocess.run(
        ["git", *args],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=check,
    )


@pytest.fixture
def bare_remote(tmp_path: Path, git_env: None) -> Path:
    """Empty bare repository standing in for the hosted remote."""
    path = tmp_path / "remote.git"
    subprocess.run(["git", "init", "--bare", str(path)], capture_output=True, check=True)
    return path


@pytest.fixture
def seeded_remote(tmp_path: Path, bare_remote: Path) -> Path:
    """Bare remote that already has an ``existing`` branch."""
    seed = tmp_path / "seed"
    seed.mkdir()
    git(seed, "init")
    (seed / "file.txt").write_text("seed\n", encoding="utf-8")
    git(seed, "add", "file.txt")
    git(seed, "commit", "-m", "seed")
    git(seed, "push", str(bare_remote), "HEAD:refs/heads/existing")
    return bare_remote
