"""Shared pytest fixtures for unix_toolchain tests."""

from __future__ import annotations

import os
import stat

import pytest

from unix_toolchain.mocks import MockFileSystem


@pytest.fixture
def mock_fs():
    """In-memory filesystem rooted at /work."""
    return MockFileSystem(cwd="/work")


@pytest.fixture
def make_tool(tmp_path):
    """Create an executable stub file and return its path as a string."""

    def _make(directory: str, name: str) -> str:
        d = tmp_path / directory
        d.mkdir(parents=True, exist_ok=True)
        path = d / name
        path.write_text("#!/bin/sh\n")
        path.chmod(path.stat().st_mode | stat.S_IXUSR)
        return str(path)

    return _make


@pytest.fixture
def clean_toolchain_env(monkeypatch):
    """Remove UNIX_TOOLCHAIN_* variables so host settings don't leak in."""
    for key in list(os.environ):
        if key.startswith("UNIX_TOOLCHAIN_"):
            monkeypatch.delenv(key, raising=False)
