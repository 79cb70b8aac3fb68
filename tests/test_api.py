"""Integration tests exercising the HTTP surface against real git."""

from __future__ import annotations

import pytest

from bridge.config import settings


@pytest.mark.asyncio
async def test_health(client):
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


@pytest.mark.asyncio
async def test_status_clean(client, git_repo):
    resp = await client.post("/git/status", json={"cwd": str(git_repo)})
    assert resp.status_code == 200
    assert resp.json() == {"success": True, "error": None, "output": ""}


@pytest.mark.asyncio
async def test_status_untracked(client, git_repo):
    (git_repo / "idea.md").write_text("?\n", encoding="utf-8")
    resp = await client.post("/git/status", json={"cwd": str(git_repo)})
    data = resp.json()
    assert data["success"] is True
    assert "idea.md" in data["output"]


@pytest.mark.asyncio
async def test_failure_is_not_an_http_error(client, tmp_path):
    resp = await client.post("/git/status", json={"cwd": str(tmp_path / "nope")})
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is False
    assert data["error"]
    assert data["output"] == ""


@pytest.mark.asyncio
async def test_add_commit_push_endpoints(client, remote_repo):
    wd, _ = remote_repo
    (wd / "a.md").write_text("a\n", encoding="utf-8")
    cwd = str(wd)

    assert (await client.post("/git/add-all", json={"cwd": cwd})).json()["success"]
    commit = await client.post("/git/commit", json={"message": "Add a", "cwd": cwd})
    assert commit.json()["success"] is True
    push = await client.post("/git/push", json={"cwd": cwd})
    assert push.json()["success"] is True


@pytest.mark.asyncio
async def test_commit_empty_message(client, git_repo):
    (git_repo / "a.md").write_text("a\n", encoding="utf-8")
    await client.post("/git/add-all", json={"cwd": str(git_repo)})
    resp = await client.post("/git/commit", json={"message": "", "cwd": str(git_repo)})
    data = resp.json()
    assert data["success"] is False
    assert "empty commit message" in data["error"]


@pytest.mark.asyncio
async def test_commit_all_and_push_endpoint(client, remote_repo):
    wd, _ = remote_repo
    (wd / "b.md").write_text("b\n", encoding="utf-8")
    resp = await client.post(
        "/git/commit-all-and-push", json={"message": "Add b", "cwd": str(wd)},
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["success"] is True
    assert data["step"] == "push"


@pytest.mark.asyncio
async def test_missing_field_is_422(client):
    resp = await client.post("/git/commit", json={"cwd": "/tmp"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_open_terminal(client, fake_launcher, tmp_path):
    resp = await client.post("/shell/terminal", json={"path": str(tmp_path)})
    assert resp.json() == {"success": True, "error": None}
    assert fake_launcher.spawned[0][1:3] == ["-a", "Terminal"]


@pytest.mark.asyncio
async def test_open_file_browser_missing(client, fake_launcher, tmp_path):
    resp = await client.post(
        "/shell/file-browser", json={"path": str(tmp_path / "missing")},
    )
    data = resp.json()
    assert data["success"] is False
    assert data["error"]


# ── invoke ───────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_list_commands(client):
    resp = await client.get("/invoke")
    assert "git_status" in resp.json()
    assert len(resp.json()) == 6


@pytest.mark.asyncio
async def test_invoke_git_status(client, git_repo):
    resp = await client.post("/invoke/git_status", json={"cwd": str(git_repo)})
    assert resp.status_code == 200
    assert resp.json()["success"] is True


@pytest.mark.asyncio
async def test_invoke_launcher_shape(client, fake_launcher, tmp_path):
    resp = await client.post("/invoke/open_finder_at", json={"path": str(tmp_path)})
    assert resp.json() == {"success": True, "error": None}


@pytest.mark.asyncio
async def test_invoke_unknown(client):
    resp = await client.post("/invoke/git_rebase", json={})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_invoke_bad_args(client):
    resp = await client.post("/invoke/git_commit", json={"cwd": "/tmp"})
    assert resp.status_code == 422


# ── auth ─────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_api_key_enforced(client, git_repo, monkeypatch):
    monkeypatch.setattr(settings, "bridge_api_key", "s3cret")
    body = {"cwd": str(git_repo)}

    assert (await client.post("/git/status", json=body)).status_code == 401
    resp = await client.post("/git/status", json=body, headers={"X-API-Key": "s3cret"})
    assert resp.status_code == 200
    # health stays open
    assert (await client.get("/health")).status_code == 200
