"""Shared pytest fixtures."""

from __future__ import annotations

import os

# Force settings to use test-safe defaults before any import
os.environ.setdefault("BRIDGE_API_KEY", "")
os.environ.setdefault("BRIDGE_GIT_EXECUTABLE", "git")

import pytest
from httpx import ASGITransport, AsyncClient

from tests.git_helpers import RecordingLauncher, configure_identity, git


@pytest.fixture
def git_repo(tmp_path):
    """A clean repository with one commit and no remote."""
    wd = tmp_path / "repo"
    wd.mkdir()
    git("init", cwd=wd)
    configure_identity(wd)
    (wd / "README.md").write_text("# notes\n", encoding="utf-8")
    git("add", ".", cwd=wd)
    git("commit", "-m", "init", cwd=wd)
    return wd


@pytest.fixture
def remote_repo(tmp_path):
    """A clone whose upstream is a local bare repository.

    Returns ``(workdir, bare)``.
    """
    bare = tmp_path / "remote.git"
    git("init", "--bare", str(bare), cwd=tmp_path)
    wd = tmp_path / "clone"
    git("clone", str(bare), str(wd), cwd=tmp_path)
    configure_identity(wd)
    (wd / "README.md").write_text("# notes\n", encoding="utf-8")
    git("add", ".", cwd=wd)
    git("commit", "-m", "init", cwd=wd)
    git("push", "-u", "origin", "HEAD", cwd=wd)
    return wd, bare


@pytest.fixture
def fake_launcher(monkeypatch):
    """Swap the launcher singleton for a :class:`RecordingLauncher`."""
    import bridge.services.launcher as launcher_mod

    recorder = RecordingLauncher()
    monkeypatch.setattr(launcher_mod, "launcher", recorder)
    return recorder


@pytest.fixture
async def client():
    """Async test client bound to the ASGI app."""
    from bridge.main import app as fastapi_app

    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
