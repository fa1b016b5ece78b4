"""Tests for pull sequencing, driven through an in-memory repo."""

import pytest

from ad_cli.git.pull import pull_module, pull_modules
from fakes import FakeRepo, completed, factory


@pytest.fixture
def ws(tmp_path):
    for name in ("m1", "m2"):
        (tmp_path / name).mkdir()
    return tmp_path


def test_clean_module_pulls_current_branch(ws):
    repo = FakeRepo(ws / "m1", branch="develop")
    result = pull_module("m1", ws, repo_factory=factory(m1=repo))
    assert result.ok
    assert repo.calls == [("pull", "origin", "develop")]


def test_dirty_module_is_not_pulled(ws, capsys):
    repo = FakeRepo(ws / "m1", dirty=True)
    result = pull_module("m1", ws, repo_factory=factory(m1=repo))
    assert not result.ok
    assert repo.calls == []
    assert "Use --force to override" in capsys.readouterr().out


def test_force_pulls_dirty_module(ws):
    repo = FakeRepo(ws / "m1", dirty=True)
    result = pull_module("m1", ws, force=True, repo_factory=factory(m1=repo))
    assert result.ok
    assert repo.mutations == ["pull"]


def test_missing_directory(ws):
    result = pull_module("nope", ws, repo_factory=factory())
    assert not result.ok
    assert result.message == "directory not found"


def test_not_a_repository(ws):
    repo = FakeRepo(ws / "m1", is_repo=False)
    result = pull_module("m1", ws, repo_factory=factory(m1=repo))
    assert not result.ok
    assert repo.calls == []


def test_detached_head(ws):
    repo = FakeRepo(ws / "m1", branch=None)
    result = pull_module("m1", ws, repo_factory=factory(m1=repo))
    assert not result.ok
    assert repo.calls == []


def test_pull_failure_detail(ws):
    repo = FakeRepo(ws / "m1", pull_result=completed(1, stderr="fatal: couldn't find remote ref main\n"))
    result = pull_module("m1", ws, repo_factory=factory(m1=repo))
    assert not result.ok
    assert result.message == "fatal: couldn't find remote ref main"


def test_batch_continues_after_failure(ws):
    m1 = FakeRepo(ws / "m1", dirty=True)
    m2 = FakeRepo(ws / "m2")
    summary = pull_modules(["m1", "m2"], ws, repo_factory=factory(m1=m1, m2=m2))
    assert summary.failed == ["m1"]
    assert summary.tally() == "1/2"
    assert m2.mutations == ["pull"]


def test_empty_batch(ws):
    summary = pull_modules([], ws)
    assert summary.tally() == "0/0"
    assert summary.passed
