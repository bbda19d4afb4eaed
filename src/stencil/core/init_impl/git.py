"""Local git queries via the ``git`` CLI."""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Callable
from pathlib import Path

from ..errors import GitCommandError
from ..reporting import Reporter

logger = logging.getLogger(__name__)

# (args, cwd) -> stripped stdout; raises on failure
GitRunner = Callable[[list[str], Path], str]

# Failures any git query may produce: non-zero exit, git missing, timeout
GIT_FAILURES = (GitCommandError, OSError, subprocess.SubprocessError)

# Remote URLs still pointing at the template's own placeholder owner
PLACEHOLDER_REMOTE_MARKERS = ("YOUR_USERNAME", "USERNAME")


def run_git(args: list[str], cwd: Path, *, timeout: int = 10) -> str:
    """Run a git subcommand in cwd and return its stdout."""
    cmd = ["git", *args]
    logger.debug("Running: %s", " ".join(cmd))
    result = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True, timeout=timeout)
    if result.returncode != 0:
        raise GitCommandError(
            f"git {' '.join(args)} failed (rc={result.returncode}): {result.stderr.strip()}"
        )
    return result.stdout.strip()


def update_git_remote(
    root: Path,
    repo_url: str,
    reporter: Reporter,
    git: GitRunner = run_git,
) -> bool:
    """
    Point ``origin`` at repo_url if it is missing or still a template placeholder.

    Never raises; every failure is reported as a warning.

    Returns:
        True if the remote was added or changed
    """
    if not repo_url:
        reporter.warn("No repository URL, skipping remote update")
        return False

    try:
        git(["rev-parse", "--git-dir"], root)
    except GIT_FAILURES:
        reporter.warn("Not a git repository, skipping remote update")
        return False

    try:
        current = git(["remote", "get-url", "origin"], root)
    except GIT_FAILURES:
        current = ""

    if current and not any(marker in current for marker in PLACEHOLDER_REMOTE_MARKERS):
        reporter.info(f"Git remote already configured: {current}")
        return False

    try:
        if current:
            git(["remote", "set-url", "origin", repo_url], root)
            reporter.success(f"Updated git remote: {repo_url}")
        else:
            git(["remote", "add", "origin", repo_url], root)
            reporter.success(f"Added git remote: {repo_url}")
    except GIT_FAILURES as e:
        reporter.warn(f"Could not update git remote: {e}")
        return False

    return True
