"""Removal result dataclass."""

from __future__ import annotations

from dataclasses import dataclass

from rmtarget.models.target import DiscoveredTarget


@dataclass(slots=True)
class RemovalResult:
    """Result of removing one build-output directory."""

    target: DiscoveredTarget
    freed_bytes: int = 0
