"""
Shared test fixtures for pyfd tests.

Provides temporary directory trees, a symlink factory that skips on platforms
without symlink support, and isolation of global logging and color settings.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from pyfd.utils.logging_config import configure_logging


def build_tree(root: Path, files: list[str], dirs: list[str] | None = None) -> Path:
    """Create ``files`` (and empty ``dirs``) below ``root``."""
    for rel in dirs or []:
        (root / rel).mkdir(parents=True, exist_ok=True)
    for rel in files:
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"{rel}\n", encoding="utf-8")
    return root


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch):
    """Keep color env vars and the global logger from leaking between tests."""
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    yield
    configure_logging(enable_console=False)


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Layout:
        LICENSE
        a/b/README.md
        a/.hidden/secret.md
    """
    root = tmp_path / "root"
    root.mkdir()
    return build_tree(root, ["LICENSE", "a/b/README.md", "a/.hidden/secret.md"])


@pytest.fixture
def make_symlink() -> Callable[[Path, Path], Path]:
    """Return a function creating ``link -> target``; skips if unsupported."""

    def _make(link: Path, target: Path) -> Path:
        try:
            os.symlink(target, link, target_is_directory=target.is_dir())
        except (OSError, NotImplementedError) as exc:
            pytest.skip(f"symlinks not supported: {exc}")
        return link

    return _make


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "cli: CLI-related tests")


@pytest.fixture
def make_undecodable() -> Callable[[Path, bytes], Path]:
    """Return a function creating a file whose name is not valid UTF-8."""

    def _make(directory: Path, name: bytes) -> Path:
        if sys.getfilesystemencoding().lower() not in ("utf-8", "utf8"):
            pytest.skip("filesystem encoding is not UTF-8")
        raw = os.path.join(os.fsencode(directory), name)
        try:
            with open(raw, "wb") as fh:
                fh.write(b"x\n")
        except OSError as exc:
            pytest.skip(f"filesystem rejects undecodable names: {exc}")
        return Path(os.fsdecode(raw))

    return _make
