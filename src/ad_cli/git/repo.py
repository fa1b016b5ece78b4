"""Thin wrapper around the git executable for one working tree.

Every call passes an explicit cwd; the process working directory is
never changed.
"""

import subprocess
from pathlib import Path

from ad_cli import log


class GitError(RuntimeError):
    """A git query failed in a way the caller cannot interpret."""

    def __init__(self, args: list[str], result: subprocess.CompletedProcess):
        self.returncode = result.returncode
        self.stderr = (result.stderr or "").strip()
        super().__init__(
            f"git {' '.join(args)} failed ({result.returncode}): {self.stderr}"
        )


def _run_git(args: list[str], cwd: Path) -> subprocess.CompletedProcess:
    """Run a git command and return the result."""
    log.debug(f"$ git {' '.join(args)}  ({cwd})")
    return subprocess.run(
        ["git"] + args,
        cwd=cwd,
        capture_output=True,
        text=True,
    )


def failure_detail(result: subprocess.CompletedProcess) -> str:
    """Best single-line explanation of a failed git call."""
    for stream in (result.stderr, result.stdout):
        lines = [line.strip() for line in (stream or "").splitlines() if line.strip()]
        if lines:
            return lines[-1]
    return f"git exited with status {result.returncode}"


class GitRepo:
    """Version-control operations on a single working tree."""

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"GitRepo({str(self.path)!r})"

    def _git(self, *args: str) -> subprocess.CompletedProcess:
        return _run_git(list(args), self.path)

    # ── queries ──────────────────────────────────────────────────

    def is_repository(self, own_root: bool = False) -> bool:
        """True when the directory is inside a git working tree.

        With own_root, the directory must be the top of its own working
        tree, so a plain folder inside the parent checkout does not count.
        """
        if not own_root:
            return self._git("rev-parse", "--git-dir").returncode == 0
        result = self._git("rev-parse", "--show-toplevel")
        if result.returncode != 0:
            return False
        return Path(result.stdout.strip()).resolve() == self.path.resolve()

    def has_uncommitted_changes(self) -> bool:
        """True when tracked files differ from HEAD (staged or not).

        A directory that is not the top of its own working tree is never
        dirty; otherwise git would report the enclosing checkout.
        """
        if not self.is_repository(own_root=True):
            return False
        result = self._git("diff-index", "--quiet", "HEAD", "--")
        if result.returncode in (0, 1):
            return result.returncode == 1
        # No HEAD yet; the repository probe reports it
        return False

    def has_unstaged_changes(self) -> bool:
        result = self._git("diff", "--quiet")
        if result.returncode not in (0, 1):
            raise GitError(["diff", "--quiet"], result)
        return result.returncode == 1

    def has_staged_changes(self) -> bool:
        result = self._git("diff", "--cached", "--quiet")
        if result.returncode not in (0, 1):
            raise GitError(["diff", "--cached", "--quiet"], result)
        return result.returncode == 1

    def staged_files(self) -> list[str]:
        result = self._git("diff", "--cached", "--name-only")
        if result.returncode != 0:
            raise GitError(["diff", "--cached", "--name-only"], result)
        return [line for line in result.stdout.splitlines() if line.strip()]

    def status_lines(self, limit: int | None = None) -> list[str]:
        """Lines of `git status --porcelain`, optionally truncated."""
        result = self._git("status", "--porcelain")
        if result.returncode != 0:
            raise GitError(["status", "--porcelain"], result)
        lines = [line for line in result.stdout.splitlines() if line.strip()]
        return lines[:limit] if limit is not None else lines

    def current_branch(self) -> str | None:
        """Current branch name, or None when HEAD is detached."""
        result = self._git("branch", "--show-current")
        if result.returncode != 0:
            raise GitError(["branch", "--show-current"], result)
        return result.stdout.strip() or None

    def has_remote(self, remote: str) -> bool:
        return self._git("remote", "get-url", remote).returncode == 0

    def remote_branch_exists(self, remote: str, branch: str) -> bool:
        """True when the remote advertises refs/heads/<branch>.

        Raises:
            GitError: If the remote cannot be reached.
        """
        args = ["ls-remote", "--exit-code", "--heads", remote, f"refs/heads/{branch}"]
        result = self._git(*args)
        if result.returncode == 0:
            return True
        if result.returncode == 2:
            return False
        raise GitError(args, result)

    # ── mutations ────────────────────────────────────────────────

    def stage_all(self) -> subprocess.CompletedProcess:
        return self._git("add", ".")

    def commit(self, message: str) -> subprocess.CompletedProcess:
        return self._git("commit", "-m", message)

    def push(self, remote: str, branch: str, force: bool = False) -> subprocess.CompletedProcess:
        args = ["push"]
        if force:
            args.append("--force")
        args += [remote, branch]
        return self._git(*args)

    def pull(self, remote: str, branch: str) -> subprocess.CompletedProcess:
        return self._git("pull", remote, branch)


def check_git_repo(repo: GitRepo, own_root: bool = False) -> bool:
    """Confirm a working tree is a git checkout, logging when it is not."""
    if not repo.is_repository(own_root=own_root):
        log.error(f"Not in a git repository: {repo.path}")
        return False
    return True
