"""Discovered build-output directory dataclass."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path


@dataclass(frozen=True, slots=True)
class DiscoveredTarget:
    """Build-output directory found beside a project manifest.

    ``modified_at`` is the mtime of the directory itself, not the newest
    file inside it.
    """

    path: Path
    size_bytes: int
    modified_at: datetime

    @property
    def project(self) -> Path:
        """Directory holding the manifest."""
        return self.path.parent
