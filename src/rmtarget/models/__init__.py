"""rmtarget data models."""

from rmtarget.models.target import DiscoveredTarget
from rmtarget.models.removal import RemovalResult

__all__ = [
    "DiscoveredTarget",
    "RemovalResult",
]
