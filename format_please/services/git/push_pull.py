"""Push to remote (origin)."""

import logging
from pathlib import Path

from format_please.services.git._run import _run_git


def push(
    repo_dir: Path | None = None,
    log: logging.Logger | None = None,
) -> None:
    """Push the current branch to its upstream."""
    cwd = Path(repo_dir) if repo_dir is not None else Path.cwd()
    _run_git(["push"], cwd=cwd, log=log)
    if log:
        log.info("Pushed current branch")
