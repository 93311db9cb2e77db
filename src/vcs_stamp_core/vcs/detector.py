"""Repository location and adapter selection."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from .base import CommandRunner, Repository, RepositoryKind, VcsAdapter
from .bzr_adapter import BzrAdapter
from .git_adapter import GitAdapter
from .hg_adapter import HgAdapter

logger = logging.getLogger(__name__)


def _adapters(runner: Optional[CommandRunner] = None) -> List[VcsAdapter]:
    # Detection order: the first marker found at a level wins.
    return [GitAdapter(runner), BzrAdapter(runner), HgAdapter(runner)]


def adapter_for(kind: RepositoryKind, runner: Optional[CommandRunner] = None) -> VcsAdapter:
    """Return the adapter that extracts metadata for ``kind``."""
    for adapter in _adapters(runner):
        if adapter.kind == kind:
            return adapter
    raise ValueError(f"Unsupported repository kind: {kind!r}")


def find_repository(start: Path) -> Optional[Repository]:
    """Walk upward from ``start`` to the nearest directory holding a VCS marker."""
    adapters = _adapters()
    cur = Path(start).absolute()
    while True:
        for adapter in adapters:
            if adapter.detect(cur):
                logger.debug("found %s repository at %s", adapter.kind.value, cur)
                return Repository(kind=adapter.kind, root=cur)
        if cur.parent == cur:
            logger.debug("no repository marker between %s and the filesystem root", start)
            return None
        cur = cur.parent


def locate(start: Path) -> Tuple[Optional[RepositoryKind], bool]:
    """Return ``(kind, True)`` for the nearest repository, else ``(None, False)``."""
    repository = find_repository(start)
    if repository is None:
        return None, False
    return repository.kind, True
