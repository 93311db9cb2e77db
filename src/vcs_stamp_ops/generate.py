"""Generate a Go version file from the enclosing repository's head."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

from vcs_stamp_core.errors import OutputWriteError, RepositoryNotFoundError, WorkingDirectoryError
from vcs_stamp_core.render import render_go_source
from vcs_stamp_core.vcs import CommandRunner, CommitMetadata, Repository, adapter_for, find_repository

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    path: Path
    repository: Repository
    metadata: CommitMetadata
    source: str
    written: bool


def resolve_start(start: Optional[Path] = None) -> Path:
    """Return ``start`` or the process working directory."""
    if start is not None:
        return Path(start)
    try:
        return Path.cwd()
    except OSError as e:
        raise WorkingDirectoryError(f"Cannot determine working directory: {e}") from e


def collect_metadata(
    start: Optional[Path] = None,
    runner: Optional[CommandRunner] = None,
) -> Tuple[Repository, CommitMetadata]:
    """Locate the enclosing repository and extract its head metadata.

    Queries run from ``start`` rather than the repository root, matching how
    the VCS tools would be invoked by hand from that directory.
    """
    cwd = resolve_start(start)
    repository = find_repository(cwd)
    if repository is None:
        raise RepositoryNotFoundError(cwd)

    metadata = adapter_for(repository.kind, runner).get_metadata(cwd)
    logger.info(
        "%s head at %s: tag=%r exact=%s",
        repository.kind.value,
        repository.root,
        metadata.tag,
        metadata.tag_is_exact,
    )
    return repository, metadata


def write_source(path: Path, source: str) -> None:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="\n") as f:
            f.write(source)
    except OSError as e:
        raise OutputWriteError(path, str(e)) from e


def generate_version_file(
    *,
    output: Path,
    package: str,
    start: Optional[Path] = None,
    runner: Optional[CommandRunner] = None,
    dry_run: bool = False,
) -> GenerateResult:
    """Render the head metadata as Go source and write it to ``output``.

    The repository is located before the output is touched, so a failed
    lookup leaves no file behind. With ``dry_run`` nothing is written.
    """
    cwd = resolve_start(start)
    repository, metadata = collect_metadata(cwd, runner)
    source = render_go_source(metadata, package)

    path = Path(output)
    if not path.is_absolute():
        path = cwd / path

    if not dry_run:
        write_source(path, source)
        logger.info("wrote %s", path)

    return GenerateResult(
        path=path,
        repository=repository,
        metadata=metadata,
        source=source,
        written=not dry_run,
    )
