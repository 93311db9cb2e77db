"""Tests for repository location."""

from pathlib import Path

import pytest

from vcs_stamp_core.vcs import Repository, RepositoryKind, adapter_for, find_repository, locate
from vcs_stamp_core.vcs.bzr_adapter import BzrAdapter
from vcs_stamp_core.vcs.git_adapter import GitAdapter
from vcs_stamp_core.vcs.hg_adapter import HgAdapter

from conftest import make_repo


def test_git_found_from_nested_directory(tmp_path: Path) -> None:
    make_repo(tmp_path / "a", ".git")
    start = tmp_path / "a" / "b" / "c"
    start.mkdir(parents=True)

    assert locate(start) == (RepositoryKind.GIT, True)
    assert find_repository(start) == Repository(RepositoryKind.GIT, tmp_path / "a")


def test_nothing_found_up_to_root(tmp_path: Path) -> None:
    start = tmp_path / "x" / "y"
    start.mkdir(parents=True)

    kind, found = locate(start)
    assert found is False
    assert kind is None
    assert find_repository(start) is None


@pytest.mark.parametrize(
    "marker, kind",
    [(".git", RepositoryKind.GIT), (".bzr", RepositoryKind.BZR), (".hg", RepositoryKind.HG)],
)
def test_each_marker_is_recognized(tmp_path: Path, marker: str, kind: RepositoryKind) -> None:
    make_repo(tmp_path, marker)
    assert locate(tmp_path) == (kind, True)


def test_mercurial_is_not_mistaken_for_bazaar(tmp_path: Path) -> None:
    make_repo(tmp_path, ".hg")
    assert find_repository(tmp_path).kind is RepositoryKind.HG


@pytest.mark.parametrize(
    "markers, expected",
    [
        ((".git", ".bzr", ".hg"), RepositoryKind.GIT),
        ((".hg", ".git"), RepositoryKind.GIT),
        ((".hg", ".bzr"), RepositoryKind.BZR),
    ],
)
def test_order_at_the_same_level(tmp_path: Path, markers, expected: RepositoryKind) -> None:
    for marker in markers:
        make_repo(tmp_path, marker)
    assert locate(tmp_path) == (expected, True)


def test_nearest_repository_wins(tmp_path: Path) -> None:
    make_repo(tmp_path, ".hg")
    inner = make_repo(tmp_path / "vendor" / "lib", ".git")
    start = inner / "pkg"
    start.mkdir()

    repository = find_repository(start)
    assert repository == Repository(RepositoryKind.GIT, inner)


def test_git_file_counts_as_marker(tmp_path: Path) -> None:
    # Worktrees and submodules carry a `.git` file pointing at the real git dir.
    (tmp_path / ".git").write_text("gitdir: /elsewhere/.git/worktrees/wt\n", encoding="utf-8")
    assert locate(tmp_path) == (RepositoryKind.GIT, True)


def test_relative_start_is_resolved(tmp_path: Path, monkeypatch) -> None:
    make_repo(tmp_path, ".bzr")
    (tmp_path / "sub").mkdir()
    monkeypatch.chdir(tmp_path)

    assert find_repository(Path("sub")) == Repository(RepositoryKind.BZR, tmp_path)


@pytest.mark.parametrize(
    "kind, adapter_type",
    [
        (RepositoryKind.GIT, GitAdapter),
        (RepositoryKind.BZR, BzrAdapter),
        (RepositoryKind.HG, HgAdapter),
    ],
)
def test_adapter_for_kind(kind: RepositoryKind, adapter_type) -> None:
    adapter = adapter_for(kind)
    assert isinstance(adapter, adapter_type)
    assert adapter.kind is kind
