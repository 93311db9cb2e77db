"""VCS layer: repository location and head metadata extraction."""

from .base import (
    EPOCH,
    CommandRunner,
    CommitMetadata,
    Repository,
    RepositoryKind,
    VcsAdapter,
)
from .bzr_adapter import BzrAdapter
from .detector import adapter_for, find_repository, locate
from .git_adapter import GitAdapter
from .hg_adapter import HgAdapter
from .runner import run

__all__ = [
    "EPOCH",
    "CommandRunner",
    "CommitMetadata",
    "Repository",
    "RepositoryKind",
    "VcsAdapter",
    "GitAdapter",
    "BzrAdapter",
    "HgAdapter",
    "adapter_for",
    "find_repository",
    "locate",
    "run",
]
