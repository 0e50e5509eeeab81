"""Shared test fixtures."""

from __future__ import annotations

import os
from pathlib import Path

import pytest


def make_project(root: Path, name: str, files: dict[str, int] | None = None, manifest: bool = True) -> Path:
    """Create ``root/name`` with an optional Cargo.toml and a populated target/.

    *files* maps paths relative to target/ to their size in bytes. Pass
    ``None`` to create no target directory at all.
    """
    project = root / name
    project.mkdir(parents=True, exist_ok=True)
    if manifest:
        (project / "Cargo.toml").write_text('[package]\nname = "demo"\n')
    if files is not None:
        target = project / "target"
        target.mkdir(exist_ok=True)
        for rel, size in files.items():
            path = target / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(b"x" * size)
    return project


def set_mtime(path: Path, timestamp: float) -> None:
    os.utime(path, (timestamp, timestamp))


@pytest.fixture
def isolate_settings(tmp_path, monkeypatch):
    """Point XDG_CONFIG_HOME at a temp directory and return the settings path."""
    config = tmp_path / "config"
    config.mkdir()
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config))
    return config / "rmtarget" / "settings.json"


@pytest.fixture
def cargo_tree(tmp_path):
    """A workspace with one project, one manifest-less dir and one unbuilt project."""
    root = tmp_path / "work"
    root.mkdir()
    # 10 files, 2048 bytes total
    files = {f"debug/f{i}.o": 200 for i in range(8)}
    files["debug/deps/a.rlib"] = 224
    files["CACHEDIR.TAG"] = 224
    make_project(root, "proj", files)
    make_project(root, "other", {"junk.bin": 4096}, manifest=False)
    make_project(root, "unbuilt", None)
    return root
