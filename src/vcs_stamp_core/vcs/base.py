"""VCS abstraction base types."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class RepositoryKind(str, Enum):
    """Supported repository types, in detection order."""

    GIT = "git"
    BZR = "bzr"
    HG = "hg"


@dataclass(frozen=True)
class Repository:
    """A located repository: its kind and the directory holding the marker."""

    kind: RepositoryKind
    root: Path


@dataclass(frozen=True)
class CommitMetadata:
    """Normalized head metadata.

    Fields a backend does not report keep their empty defaults: git fills
    the hashes, bazaar the revision number and id, mercurial the revision
    number and node (as ``long_hash``).
    """

    kind: RepositoryKind
    short_hash: str = ""
    long_hash: str = ""
    revision_id: str = ""
    revision_number: Optional[int] = None
    tag: str = ""
    tag_is_exact: bool = False
    commit_date: datetime = EPOCH

    @property
    def commit_unix(self) -> int:
        return int(self.commit_date.timestamp())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": self.kind.value,
            "short_hash": self.short_hash,
            "long_hash": self.long_hash,
            "revision_id": self.revision_id,
            "revision_number": self.revision_number,
            "tag": self.tag,
            "tag_is_exact": self.tag_is_exact,
            "commit_date": self.commit_date.isoformat(),
            "commit_unix": self.commit_unix,
        }


class CommandRunner(Protocol):
    """Callable that runs a space-separated command line and returns stdout."""

    def __call__(self, command_line: str, cwd: Optional[Path] = None) -> str:
        ...


class VcsAdapter(Protocol):
    """VCS adapter protocol."""

    kind: RepositoryKind
    marker: str

    def detect(self, path: Path) -> bool:
        """Check if this VCS marker is present directly in ``path``."""
        ...

    def get_metadata(self, cwd: Path) -> CommitMetadata:
        """Query the VCS and normalize the head metadata."""
        ...
