"""Directory tree walk that finds build-output directories."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from rmtarget.errors import ScanError
from rmtarget.models.target import DiscoveredTarget
from rmtarget.settings import DEFAULT_MANIFEST, DEFAULT_TARGET_DIR
from rmtarget.utils import dir_size, modified_time

log = logging.getLogger(__name__)


def scan_tree(
    root: Path | str,
    manifest: str = DEFAULT_MANIFEST,
    output_dir: str = DEFAULT_TARGET_DIR,
) -> list[DiscoveredTarget]:
    """Find every *output_dir* that sits directly beside a *manifest* file.

    Walks *root* (inclusive) depth-first with an explicit stack, so deep
    trees do not hit the recursion limit. Directories that cannot be listed
    are skipped. The build-output folder itself is walked too, so projects
    nested inside it are reported as well.

    Args:
        root: Directory to start from. Relative roots give relative paths.
        manifest: File name marking a project root, e.g. ``Cargo.toml``.
        output_dir: Name of the build-output subdirectory, e.g. ``target``.

    Returns:
        Discovered targets in walk order.

    Raises:
        ScanError: The size or mtime of a qualifying directory is unreadable.
    """
    found: list[DiscoveredTarget] = []
    stack: list[Path] = [Path(root)]

    while stack:
        current = stack.pop()
        try:
            with os.scandir(current) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            log.debug("Cannot list %s: %s", current, e)
            continue

        has_manifest = False
        has_output = False
        subdirs: list[Path] = []
        for entry in entries:
            try:
                if entry.is_dir(follow_symlinks=False):
                    subdirs.append(current / entry.name)
                    if entry.name == output_dir:
                        has_output = True
                elif entry.is_file(follow_symlinks=False) and entry.name == manifest:
                    has_manifest = True
            except OSError as e:
                log.debug("Cannot access %s: %s", entry.path, e)

        # Reversed so the first entry by name is visited first
        stack.extend(reversed(subdirs))

        if has_manifest and has_output:
            target = _measure(current / output_dir)
            log.debug("Found %s (%d bytes)", target.path, target.size_bytes)
            found.append(target)

    return found


def _measure(path: Path) -> DiscoveredTarget:
    try:
        size = dir_size(path)
    except OSError as e:
        raise ScanError(path, "size") from e
    try:
        mtime = modified_time(path)
    except OSError as e:
        raise ScanError(path, "modification time") from e
    return DiscoveredTarget(path=path, size_bytes=size, modified_at=mtime)
