"""Git module: pull and sync operations across the workspace modules."""

from ad_cli.git.repo import GitError, GitRepo, check_git_repo
from ad_cli.git.results import OperationResult, OperationSummary
from ad_cli.git.pull import pull_module, pull_modules
from ad_cli.git.sync import generate_commit_message, sync_target, sync_targets

__all__ = [
    "GitError",
    "GitRepo",
    "check_git_repo",
    "OperationResult",
    "OperationSummary",
    "pull_module",
    "pull_modules",
    "generate_commit_message",
    "sync_target",
    "sync_targets",
]
