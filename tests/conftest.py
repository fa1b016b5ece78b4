"""Shared test fixtures for ad-cli."""

import subprocess
from pathlib import Path

import pytest

FIXTURES = Path(__file__).parent / "fixtures"

GIT_IDENTITY = {
    "GIT_AUTHOR_NAME": "test",
    "GIT_AUTHOR_EMAIL": "t@t",
    "GIT_COMMITTER_NAME": "test",
    "GIT_COMMITTER_EMAIL": "t@t",
}


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep git and ad from reading the developer's own configuration."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    for key, value in GIT_IDENTITY.items():
        monkeypatch.setenv(key, value)
    for var in ("AD_WORKSPACE_DIR", "AD_CONFIG", "AD_VERBOSE"):
        monkeypatch.delenv(var, raising=False)


def git(cwd: Path, *args: str) -> str:
    result = subprocess.run(["git", *args], cwd=cwd, capture_output=True, text=True)
    assert result.returncode == 0, f"git {' '.join(args)}: {result.stderr}"
    return result.stdout


def make_repo(path: Path, remotes: Path, files: dict[str, str] | None = None) -> Path:
    """Create a repo with one commit on main, pushed to a fresh bare remote."""
    path.mkdir(parents=True)
    git(path, "init", "-b", "main")
    for name, content in (files or {"README.md": "init\n"}).items():
        target = path / name
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content)
    git(path, "add", ".")
    git(path, "commit", "-m", "init")

    remotes.mkdir(exist_ok=True)
    bare = remotes / f"{path.name}.git"
    git(remotes, "init", "--bare", "-b", "main", bare.name)
    git(path, "remote", "add", "origin", str(bare))
    git(path, "push", "origin", "main")
    return bare


def remote_log(bare: Path, branch: str = "main") -> list[str]:
    return git(bare, "log", "--format=%s", branch).splitlines()


@pytest.fixture
def workspace(tmp_path):
    """Parent checkout with two module checkouts, m1 and m2.

    The parent ignores the module directories and restricts the registry
    to them through ad.yaml. Returns (workspace, {name: bare remote}).
    """
    ws = tmp_path / "ws"
    remotes = tmp_path / "remotes"
    bares = {
        ".": make_repo(ws, remotes, {
            ".gitignore": "m1/\nm2/\n",
            "ad.yaml": "modules:\n  - m1\n  - m2\n",
        }),
    }
    for name in ("m1", "m2"):
        bares[name] = make_repo(ws / name, remotes, {"app.txt": f"{name}\n"})
    return ws, bares
