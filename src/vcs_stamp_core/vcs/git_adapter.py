"""Git VCS adapter."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .base import CommandRunner, CommitMetadata, RepositoryKind
from .parsing import from_unix, parse_int
from .runner import run


class GitAdapter:
    """Git VCS adapter."""

    kind = RepositoryKind.GIT
    marker = ".git"

    def __init__(self, runner: Optional[CommandRunner] = None) -> None:
        self._run = runner or run

    def detect(self, path: Path) -> bool:
        """Check if Git is present."""
        return (path / self.marker).exists()

    def get_metadata(self, cwd: Path) -> CommitMetadata:
        """Get Git metadata."""
        short_hash = self._run("git rev-parse --short HEAD", cwd)
        long_hash = self._run("git rev-parse HEAD", cwd)
        # Nearest reachable tag, without the "-<n>-g<hash>" distance suffix.
        tag = self._run("git describe --abbrev=0 --tags", cwd)
        # Only prints when HEAD is the tagged commit itself.
        exact_tag = self._run("git describe --exact-match --tags", cwd)
        date_str = self._run("git show -s --format=%ct", cwd)

        return CommitMetadata(
            kind=self.kind,
            short_hash=short_hash,
            long_hash=long_hash,
            tag=tag,
            tag_is_exact=bool(tag) and tag == exact_tag,
            commit_date=from_unix(parse_int(date_str)),
        )
