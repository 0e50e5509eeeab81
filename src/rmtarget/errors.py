"""Exceptions raised by the scan, selection and removal steps."""

from __future__ import annotations

from pathlib import Path


class RmTargetError(Exception):
    """Base class for all rmtarget failures."""


class ScanError(RmTargetError):
    """Raised when a qualifying build-output directory cannot be measured."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot read {reason} of {path}")
        self.path = path


class SelectionError(RmTargetError):
    """Raised for malformed or out-of-range selection input."""


class RemovalError(RmTargetError):
    """Raised when a selected directory cannot be removed."""

    def __init__(self, path: Path, exc: OSError) -> None:
        super().__init__(f"failed to remove {path}: {exc.strerror or exc}")
        self.path = path
