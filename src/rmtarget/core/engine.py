"""Scan, sort and removal orchestration engine."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Callable, Iterable

from rmtarget.errors import RemovalError
from rmtarget.models.removal import RemovalResult
from rmtarget.models.target import DiscoveredTarget
from rmtarget.core.scanner import scan_tree
from rmtarget.core.selection import dedupe, validate
from rmtarget.settings import DEFAULT_MANIFEST, DEFAULT_SORT, DEFAULT_TARGET_DIR

log = logging.getLogger(__name__)

RemovalCallback = Callable[[RemovalResult], None]

# order name -> (sort key, reverse)
SORT_ORDERS: dict[str, tuple[Callable[[DiscoveredTarget], object], bool]] = {
    "size": (lambda t: t.size_bytes, True),
    "rsize": (lambda t: t.size_bytes, False),
    "time": (lambda t: t.modified_at, False),
    "rtime": (lambda t: t.modified_at, True),
}


def sort_targets(targets: Iterable[DiscoveredTarget], order: str = DEFAULT_SORT) -> list[DiscoveredTarget]:
    """Return *targets* sorted by one of the ``SORT_ORDERS`` names.

    Ties keep their incoming order.
    """
    try:
        key, reverse = SORT_ORDERS[order]
    except KeyError:
        raise ValueError(f"unknown sort order '{order}'") from None
    return sorted(targets, key=key, reverse=reverse)


class TargetEngine:
    """Orchestrates scanning for and removing build-output directories."""

    def __init__(
        self,
        manifest: str = DEFAULT_MANIFEST,
        output_dir: str = DEFAULT_TARGET_DIR,
    ) -> None:
        self.manifest = manifest
        self.output_dir = output_dir
        self._last_scan: list[DiscoveredTarget] = []

    @property
    def last_scan(self) -> list[DiscoveredTarget]:
        """Sorted targets from the most recent scan; removal indexes into this."""
        return list(self._last_scan)

    @property
    def total_bytes(self) -> int:
        return sum(t.size_bytes for t in self._last_scan)

    def scan(self, root: Path | str = ".", sort: str = DEFAULT_SORT) -> list[DiscoveredTarget]:
        """Scan *root* and cache the result sorted by *sort*.

        Raises:
            ScanError: A qualifying directory could not be measured.
            ValueError: *sort* is not a known order.
        """
        targets = scan_tree(root, manifest=self.manifest, output_dir=self.output_dir)
        self._last_scan = sort_targets(targets, sort)
        log.info("Scanned %s: %d target(s), %d bytes", root, len(self._last_scan), self.total_bytes)
        return self.last_scan

    def remove(
        self,
        indices: Iterable[int],
        on_result: RemovalCallback | None = None,
    ) -> list[RemovalResult]:
        """Remove the last-scan targets at *indices*.

        All indices are checked before anything is deleted. Removal then
        stops at the first failure; directories already removed stay
        removed.

        Args:
            indices: Positions in ``last_scan``. Duplicates are ignored.
            on_result: Optional callback fired after each removal.

        Raises:
            SelectionError: Any index is out of range. Nothing is removed.
            RemovalError: A directory could not be removed.
        """
        selection = dedupe(indices)
        validate(selection, len(self._last_scan))

        results: list[RemovalResult] = []
        for index in selection:
            target = self._last_scan[index]
            try:
                shutil.rmtree(target.path)
            except OSError as e:
                raise RemovalError(target.path, e) from e
            log.info("Removed %s (%d bytes)", target.path, target.size_bytes)
            result = RemovalResult(target=target, freed_bytes=target.size_bytes)
            results.append(result)
            if on_result:
                on_result(result)
        return results
