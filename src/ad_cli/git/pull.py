"""Pull modules from their remote tracking branches."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ad_cli import log
from ad_cli.git.repo import GitError, GitRepo, check_git_repo, failure_detail
from ad_cli.git.results import OperationResult, OperationSummary
from ad_cli.module_config import DEFAULT_REMOTE

RepoFactory = Callable[[Path], GitRepo]


def pull_module(
    module: str,
    workspace: Path,
    remote: str = DEFAULT_REMOTE,
    force: bool = False,
    repo_factory: RepoFactory = GitRepo,
) -> OperationResult:
    """Pull one module from <remote>/<current branch>.

    Preconditions are checked in order: directory present, clean tree
    (unless force), git checkout, attached HEAD, remote configured. The
    first one that fails is recorded and nothing is pulled.

    Args:
        module: Module directory name.
        workspace: Workspace root holding the module directories.
        remote: Remote to pull from.
        force: Pull even when the tree has uncommitted changes.
        repo_factory: Builds the repo wrapper for a directory.

    Returns:
        OperationResult for the module.
    """
    log.info(f"Pulling {module}...")

    path = workspace / module
    if not path.is_dir():
        log.error(f"Module directory '{module}' not found")
        return OperationResult(module, False, "directory not found")

    repo = repo_factory(path)

    if not force and repo.has_uncommitted_changes():
        log.warning(f"Module '{module}' has uncommitted changes. Use --force to override.")
        return OperationResult(module, False, "uncommitted changes")

    if not check_git_repo(repo, own_root=True):
        return OperationResult(module, False, "not a git repository")

    try:
        branch = repo.current_branch()
    except GitError as e:
        log.error(f"Failed to read branch of {module}: {e.stderr}")
        return OperationResult(module, False, str(e))

    if not branch:
        log.error(f"Module {module} is in detached HEAD state. Please checkout a branch first.")
        return OperationResult(module, False, "detached HEAD")

    if not repo.has_remote(remote):
        log.error(f"Module {module} has no remote named '{remote}'")
        return OperationResult(module, False, f"no remote '{remote}'")

    result = repo.pull(remote, branch)
    if result.returncode != 0:
        detail = failure_detail(result)
        log.error(f"Failed to pull {module}: {detail}")
        return OperationResult(module, False, detail)

    log.success(f"Successfully pulled {module} ({branch})")
    return OperationResult(module, True, branch)


def pull_modules(
    modules: list[str],
    workspace: Path,
    remote: str = DEFAULT_REMOTE,
    force: bool = False,
    repo_factory: RepoFactory = GitRepo,
) -> OperationSummary:
    """Pull every module in order; one failure never stops the batch."""
    summary = OperationSummary()
    for module in modules:
        summary.add(pull_module(
            module,
            workspace,
            remote=remote,
            force=force,
            repo_factory=repo_factory,
        ))
    return summary
