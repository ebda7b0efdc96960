"""Shared fixtures: an isolated store location and a factory for real files."""
from __future__ import annotations

import pytest

from recent_commander.config import StoreConfig
from recent_commander.history import HistoryStore


@pytest.fixture
def config(tmp_path):
    """Store config pointing into the test's temporary directory."""
    return StoreConfig(store_path=tmp_path / "data" / "recent.txt", max_entries=10000, editor="true")


@pytest.fixture
def store(config):
    s = HistoryStore(config)
    s.ensure()
    return s


@pytest.fixture
def make_file(tmp_path):
    """Create a file under tmp_path/files and return its canonical path."""
    root = tmp_path / "files"

    def _make(name: str, text: str = "") -> str:
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return str(path.resolve())

    return _make


@pytest.fixture
def write_store(config):
    """Write raw entries straight to the store file, bypassing validation."""

    def _write(entries):
        config.store_path.parent.mkdir(parents=True, exist_ok=True)
        config.store_path.write_text("".join(e + "\n" for e in entries), encoding="utf-8")

    return _write


@pytest.fixture
def read_store(config):
    """Entries currently persisted in the store file."""

    def _read():
        return [line for line in config.store_path.read_text(encoding="utf-8").splitlines() if line]

    return _read
