"""Shared utility functions."""

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path

_SIZE_SUFFIXES = ("B", "K", "M", "G", "T", "E")
_TIME_FORMAT = "%Y-%m-%d %H:%M"


def xdg_config_home() -> Path:
    """Return XDG_CONFIG_HOME, defaulting to ~/.config."""
    return Path(os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config"))


def dir_size(path: Path | str) -> int:
    """Sum the sizes of all regular files below *path*.

    Symlinks are neither followed nor counted. Any ``OSError`` raised while
    listing or stat-ing propagates to the caller.
    """
    total = 0
    stack: list[Path | str] = [path]
    while stack:
        current = stack.pop()
        with os.scandir(current) as it:
            for entry in it:
                if entry.is_file(follow_symlinks=False):
                    total += entry.stat(follow_symlinks=False).st_size
                elif entry.is_dir(follow_symlinks=False):
                    stack.append(entry.path)
    return total


def modified_time(path: Path | str) -> datetime:
    """Return the local, timezone-aware mtime of *path* itself."""
    return datetime.fromtimestamp(os.stat(path).st_mtime).astimezone()


def bytes_to_human(size_bytes: int) -> str:
    """Convert a byte count to a compact binary-unit string, e.g. ``2.0K``."""
    value = float(size_bytes)
    level = 0
    while value > 1024 and level < len(_SIZE_SUFFIXES) - 1:
        value /= 1024
        level += 1
    return f"{value:.1f}{_SIZE_SUFFIXES[level]}"


def format_mtime(dt: datetime) -> str:
    """Format a timestamp as ``YYYY-MM-DD HH:MM``."""
    return dt.strftime(_TIME_FORMAT)
