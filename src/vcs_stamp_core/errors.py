"""Exception taxonomy for vcs-stamp-core."""

from pathlib import Path


class StampError(Exception):
    """Base exception for all vcs-stamp errors."""

    pass


# Config errors


class ConfigError(StampError):
    """Failed to load or validate configuration."""

    pass


# Process-level errors


class WorkingDirectoryError(StampError):
    """The current working directory could not be determined."""

    pass


class RepositoryNotFoundError(StampError):
    """No git, bazaar or mercurial repository encloses the start directory."""

    def __init__(self, start: Path) -> None:
        self.start = start
        super().__init__(f"No repository found from {start}")


class OutputWriteError(StampError):
    """Failed to create the output file or its parent directories."""

    def __init__(self, path: Path, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Cannot write {path}: {details}")
