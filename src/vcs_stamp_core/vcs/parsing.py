"""Lenient conversions shared by the adapters. Failures yield defaults."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Union

from .base import EPOCH


def parse_int(text: str) -> int:
    """Parse an integer literal (``0x``/``0o``/``0b`` prefixes allowed), else 0."""
    try:
        return int(text, 0)
    except ValueError:
        return 0


def parse_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


def from_unix(seconds: Union[int, float]) -> datetime:
    """Convert epoch seconds to an aware UTC datetime, else the epoch."""
    try:
        return datetime.fromtimestamp(int(seconds), tz=timezone.utc)
    except (OverflowError, OSError, ValueError):
        return EPOCH


def parse_timestamp(text: str, fmt: str) -> datetime:
    """Parse an absolute timestamp with a UTC offset and normalize it to UTC."""
    try:
        return datetime.strptime(text, fmt).astimezone(timezone.utc)
    except ValueError:
        return EPOCH
