"""vcs-stamp core: repository detection, metadata extraction and rendering."""

from .__version__ import __version__, __version_info__

from .config import StampConfig, StampConfigLoader
from .errors import (
    ConfigError,
    OutputWriteError,
    RepositoryNotFoundError,
    StampError,
    WorkingDirectoryError,
)
from .render import render_go_source
from .vcs import (
    CommitMetadata,
    Repository,
    RepositoryKind,
    adapter_for,
    find_repository,
    locate,
    run,
)

__all__ = [
    # Version
    "__version__",
    "__version_info__",
    # Config
    "StampConfig",
    "StampConfigLoader",
    # VCS
    "CommitMetadata",
    "Repository",
    "RepositoryKind",
    "adapter_for",
    "find_repository",
    "locate",
    "run",
    # Rendering
    "render_go_source",
    # Errors
    "StampError",
    "ConfigError",
    "WorkingDirectoryError",
    "RepositoryNotFoundError",
    "OutputWriteError",
]
