"""Mercurial VCS adapter."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .base import CommandRunner, CommitMetadata, RepositoryKind
from .parsing import from_unix, parse_float, parse_int
from .runner import run

# `{latesttag}` when no tag is reachable from the head.
UNTAGGED = "null"


class HgAdapter:
    """Mercurial VCS adapter.

    All queries go through ``hg heads .`` with a template. Tag exactness comes
    from ``{latesttagdistance}`` rather than comparing tags: a distance of 1
    means the head is the commit that added the tag. An untagged history
    reports the pseudo-tag ``null``, which is stored as an empty tag.
    """

    kind = RepositoryKind.HG
    marker = ".hg"

    def __init__(self, runner: Optional[CommandRunner] = None) -> None:
        self._run = runner or run

    def detect(self, path: Path) -> bool:
        return (path / self.marker).exists()

    def get_metadata(self, cwd: Path) -> CommitMetadata:
        # "{date}" is "<unixtime>.<tzoffset>"; only the integral seconds are kept.
        date_str = self._run("hg heads . -T {date}", cwd)
        tag = self._run("hg heads . -T {latesttag}", cwd)
        if tag == UNTAGGED:
            tag = ""
        rev_str = self._run("hg heads . -T {rev}", cwd)
        node = self._run("hg heads . -T {node}", cwd)
        distance = self._run("hg heads . -T {latesttagdistance}", cwd)

        return CommitMetadata(
            kind=self.kind,
            long_hash=node,
            revision_number=parse_int(rev_str),
            tag=tag,
            tag_is_exact=bool(tag) and distance == "1",
            commit_date=from_unix(parse_float(date_str)),
        )
