from pathlib import Path
from typing import Dict, List, Optional, Tuple

from hypothesis import settings

# Prevent Hypothesis from writing a local example database (e.g. `.hypothesis/`) during tests.
settings.register_profile("vcs-stamp-tests", database=None)
settings.load_profile("vcs-stamp-tests")


class FakeRunner:
    """Command runner returning canned stdout; unknown commands behave as failures."""

    def __init__(self, outputs: Optional[Dict[str, str]] = None) -> None:
        self.outputs = dict(outputs or {})
        self.calls: List[Tuple[str, Optional[Path]]] = []

    def __call__(self, command_line: str, cwd: Optional[Path] = None) -> str:
        self.calls.append((command_line, cwd))
        return self.outputs.get(command_line, "")


GIT_OUTPUTS = {
    "git rev-parse --short HEAD": "1a2b3c4",
    "git rev-parse HEAD": "1a2b3c4d5e6f7a8b9c0d1e2f3a4b5c6d7e8f9a0b",
    "git describe --abbrev=0 --tags": "v1.4.0",
    "git describe --exact-match --tags": "v1.4.0",
    "git show -s --format=%ct": "1700000000",
}

BZR_OUTPUTS = {
    "bzr version-info --custom --template {date}": "2024-03-01 12:30:00 +0100",
    "bzr version-info --custom --template {revno}": "42",
    "bzr version-info --custom --template {revision_id}": "jdoe@example.com-20240301113000-abcdef",
    "bzr tags --sort=time": "release-2.0          42\nrelease-1.9          37",
}

HG_OUTPUTS = {
    "hg heads . -T {date}": "1700000000.03600",
    "hg heads . -T {latesttag}": "2.1",
    "hg heads . -T {rev}": "118",
    "hg heads . -T {node}": "9f8e7d6c5b4a39281706f5e4d3c2b1a098765432",
    "hg heads . -T {latesttagdistance}": "1",
}


def make_repo(root: Path, marker: str = ".git") -> Path:
    """Create a bare marker directory so the locator treats ``root`` as a repository."""
    (root / marker).mkdir(parents=True, exist_ok=True)
    return root
