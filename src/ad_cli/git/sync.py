"""Stage, commit and push the parent checkout or individual modules.

A sync target is either "." (the workspace checkout itself) or a module
name. Each target is handled on its own: a failure is recorded and the
remaining targets still run, and nothing already pushed is rolled back.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from ad_cli import log
from ad_cli.git.repo import GitError, GitRepo, check_git_repo, failure_detail
from ad_cli.git.results import OperationResult, OperationSummary
from ad_cli.module_config import DEFAULT_REMOTE, PARENT_TARGET

RepoFactory = Callable[[Path], GitRepo]

# Lines of `git status --porcelain` shown per target in a dry run
DRY_RUN_PREVIEW = 10


def target_label(target: str) -> str:
    return "parent repository" if target == PARENT_TARGET else target


def generate_commit_message(target: str, staged: list[str]) -> str:
    """Auto-generate a commit message for one target.

    The parent checkout names its single staged path, or counts them;
    a module always gets "Update <module> module".
    """
    if target != PARENT_TARGET:
        return f"Update {target} module"
    if len(staged) == 1:
        return f"Update {staged[0]}"
    return f"Update {len(staged)} files"


def _target_path(target: str, workspace: Path) -> Path:
    return workspace if target == PARENT_TARGET else workspace / target


def sync_target(
    target: str,
    workspace: Path,
    message: str | None = None,
    remote: str = DEFAULT_REMOTE,
    force: bool = False,
    dry_run: bool = False,
    repo_factory: RepoFactory = GitRepo,
) -> OperationResult:
    """Sync one target: add, commit, push.

    Args:
        target: "." for the parent checkout, or a module name.
        workspace: Workspace root.
        message: Commit message. Auto-generated per target if not provided.
        remote: Remote to push to. Its branch must already exist.
        force: Push with --force.
        dry_run: Only show pending changes; never stages, commits or pushes.
        repo_factory: Builds the repo wrapper for a directory.

    Returns:
        OperationResult for the target. "Nothing to sync" is a success.
    """
    label = target_label(target)
    log.info(f"Syncing {label}...")

    path = _target_path(target, workspace)
    if not path.is_dir():
        log.error(f"Module directory '{target}' not found")
        return OperationResult(target, False, "directory not found")

    repo = repo_factory(path)
    if not check_git_repo(repo, own_root=target != PARENT_TARGET):
        return OperationResult(target, False, "not a git repository")

    try:
        return _sync_repo(repo, target, message, remote, force, dry_run)
    except GitError as e:
        log.error(f"Failed to sync {label}: {e}")
        return OperationResult(target, False, str(e))


def _sync_repo(
    repo: GitRepo,
    target: str,
    message: str | None,
    remote: str,
    force: bool,
    dry_run: bool,
) -> OperationResult:
    label = target_label(target)

    if dry_run:
        log.info(f"Would sync {label}:")
        for line in repo.status_lines(limit=DRY_RUN_PREVIEW):
            log.plain(line)
        return OperationResult(target, True, "dry run")

    if not repo.has_unstaged_changes() and not repo.has_staged_changes():
        log.warning(f"No changes to sync in {label}")
        return OperationResult(target, True, "nothing to sync")

    staged = repo.stage_all()
    if staged.returncode != 0:
        detail = failure_detail(staged)
        log.error(f"Failed to stage changes in {label}: {detail}")
        return OperationResult(target, False, detail)

    if not repo.has_staged_changes():
        log.warning(f"No staged changes to commit in {label}")
        return OperationResult(target, True, "nothing staged")

    commit_message = message or generate_commit_message(target, repo.staged_files())

    committed = repo.commit(commit_message)
    if committed.returncode != 0:
        detail = failure_detail(committed)
        log.error(f"Failed to commit {label}: {detail}")
        return OperationResult(target, False, detail)

    branch = repo.current_branch()
    if not branch:
        log.error(f"{label} is in detached HEAD state. Please checkout a branch first.")
        return OperationResult(target, False, "detached HEAD")

    if not repo.has_remote(remote):
        log.error(f"{label} has no remote named '{remote}'")
        return OperationResult(target, False, f"no remote '{remote}'")

    if not repo.remote_branch_exists(remote, branch):
        log.error(f"Branch '{branch}' does not exist on {remote} for {label}; not creating it")
        return OperationResult(target, False, f"no remote branch {remote}/{branch}")

    pushed = repo.push(remote, branch, force=force)
    if pushed.returncode != 0:
        detail = failure_detail(pushed)
        log.error(f"Failed to push {label}: {detail}")
        return OperationResult(target, False, detail)

    log.success(f"Successfully synced {label} ({branch})")
    return OperationResult(target, True, commit_message)


def sync_targets(
    targets: list[str],
    workspace: Path,
    message: str | None = None,
    remote: str = DEFAULT_REMOTE,
    force: bool = False,
    dry_run: bool = False,
    repo_factory: RepoFactory = GitRepo,
) -> OperationSummary:
    """Sync every target in order; one failure never stops the batch."""
    summary = OperationSummary()
    for target in targets:
        summary.add(sync_target(
            target,
            workspace,
            message=message,
            remote=remote,
            force=force,
            dry_run=dry_run,
            repo_factory=repo_factory,
        ))
    return summary
