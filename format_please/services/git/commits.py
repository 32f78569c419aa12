"""Identity, staging, staged-diff check and commit."""

import logging
from pathlib import Path
from typing import Sequence

from format_please.models import StagedDiff
from format_please.services.git._run import GitRunnerError, _run_git, _run_git_status


def configure_identity(
    name: str,
    email: str,
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Set user.name and user.email in the repository config."""
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(["config", "user.name", name], cwd=cwd, log=log)
    _run_git(["config", "user.email", email], cwd=cwd, log=log)


def stage_files(
    paths: Sequence[str],
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Stage the given paths (git add). Nothing is run for an empty list."""
    if not paths:
        return
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(["add", "--"] + list(paths), cwd=cwd, log=log)


def diff_cached(
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> StagedDiff:
    """Compare the index with HEAD using ``git diff --cached --quiet``.

    Exit 0 is UNCHANGED, exit 1 is CHANGED. Any other exit code is a real
    failure and raises GitRunnerError.
    """
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    code = _run_git_status(["diff", "--cached", "--quiet"], cwd=cwd, log=log)
    if code == 0:
        return StagedDiff.UNCHANGED
    if code == 1:
        return StagedDiff.CHANGED
    raise GitRunnerError(f"git diff --cached --quiet: exit code {code}")


def commit(
    commit_message: str,
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Commit staged changes with the configured identity."""
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(["commit", "-m", commit_message], cwd=cwd, log=log)
    if log:
        log.info("Committed: %s", commit_message)
