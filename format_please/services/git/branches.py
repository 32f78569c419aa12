"""Fetch and check out the pull request head branch."""

import logging
from pathlib import Path

from format_please.services.git._run import _run_git


def fetch_and_checkout_branch(
    branch_name: str,
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Fetch a pull request head ref from origin and switch the working tree to it.

    git creates the local branch tracking origin/<branch_name> on first
    checkout, so a later bare ``git push`` goes back to the pull request.
    """
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(["fetch", "origin", branch_name], cwd=cwd, log=log)
    _run_git(["checkout", branch_name], cwd=cwd, log=log)
    if log:
        log.info("Checked out pull request head %s", branch_name)
