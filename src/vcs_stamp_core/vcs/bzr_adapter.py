"""Bazaar VCS adapter."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional, Tuple

from .base import CommandRunner, CommitMetadata, RepositoryKind
from .parsing import parse_int, parse_timestamp
from .runner import run

# `bzr version-info --custom --template {date}` prints e.g. "2024-03-01 12:30:00 +0100".
DATE_FORMAT = "%Y-%m-%d %H:%M:%S %z"

# One `bzr tags` line: tag name, column padding, revno the tag points at.
_TAG_LINE = re.compile(r"^(.*?)\s+(\S+)$")


def parse_tag_line(tags_output: str) -> Tuple[str, str]:
    """Return (tag, revno) from the first line of `bzr tags`, or ("", "")."""
    first_line = tags_output.split("\n", 1)[0]
    match = _TAG_LINE.match(first_line)
    if match is None:
        return "", ""
    return match.group(1), match.group(2)


class BzrAdapter:
    """Bazaar VCS adapter."""

    kind = RepositoryKind.BZR
    marker = ".bzr"

    def __init__(self, runner: Optional[CommandRunner] = None) -> None:
        self._run = runner or run

    def detect(self, path: Path) -> bool:
        return (path / self.marker).exists()

    def get_metadata(self, cwd: Path) -> CommitMetadata:
        date_str = self._run("bzr version-info --custom --template {date}", cwd)
        revno_str = self._run("bzr version-info --custom --template {revno}", cwd)
        revision_id = self._run("bzr version-info --custom --template {revision_id}", cwd)
        tags_str = self._run("bzr tags --sort=time", cwd)

        tag, tag_revno = parse_tag_line(tags_str)

        return CommitMetadata(
            kind=self.kind,
            revision_id=revision_id,
            revision_number=parse_int(revno_str),
            tag=tag,
            tag_is_exact=bool(tag_revno) and tag_revno == revno_str,
            commit_date=parse_timestamp(date_str, DATE_FORMAT),
        )
