"""External command execution for VCS queries.

Command lines are split on single literal spaces, so an argument cannot
contain a space. Quoting is not interpreted.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

_TRIM = " \t\n\r"


def run(command_line: str, cwd: Optional[Path] = None) -> str:
    """Run a command and return its trimmed stdout, or "" on any failure."""
    args = command_line.split(" ")
    logger.debug("run: %s (cwd=%s)", command_line, cwd)
    try:
        result = subprocess.run(
            args,
            cwd=str(cwd) if cwd is not None else None,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
        )
    except OSError as exc:
        logger.debug("run failed: %s: %s", command_line, exc)
        return ""

    if result.returncode != 0:
        logger.debug("run failed: %s exited with %d", command_line, result.returncode)
        return ""

    return result.stdout.strip(_TRIM)
