"""Internal helpers: run git commands, GitRunnerError."""

import logging
import subprocess
from pathlib import Path

GIT_TIMEOUT_SECONDS = 300


class GitRunnerError(Exception):
    """Raised when a git command fails."""

    pass


def _run_git(args: list[str], cwd: Path, log: logging.Logger | None = None) -> None:
    """Run git command; raise GitRunnerError on non-zero exit."""
    cmd = ["git"] + args
    if log:
        log.debug("Running git %s", " ".join(args))
    try:
        subprocess.run(cmd, cwd=cwd, check=True, capture_output=True, text=True, timeout=GIT_TIMEOUT_SECONDS)
    except subprocess.CalledProcessError as e:
        err = (e.stderr or e.stdout or "").strip()
        if log:
            log.warning("Git %s failed: %s", args, err)
        raise GitRunnerError(f"git {' '.join(args)}: {err}") from e
    except subprocess.TimeoutExpired as e:
        raise GitRunnerError(f"git {' '.join(args)}: timed out") from e
    except FileNotFoundError as e:
        raise GitRunnerError("git not found") from e


def _run_git_status(args: list[str], cwd: Path, log: logging.Logger | None = None) -> int:
    """Run git command and return its exit code without raising on non-zero.

    Only a missing git binary or a timeout raise GitRunnerError.
    """
    cmd = ["git"] + args
    if log:
        log.debug("Running git %s", " ".join(args))
    try:
        result = subprocess.run(cmd, cwd=cwd, capture_output=True, text=True, timeout=GIT_TIMEOUT_SECONDS)
    except subprocess.TimeoutExpired as e:
        raise GitRunnerError(f"git {' '.join(args)}: timed out") from e
    except FileNotFoundError as e:
        raise GitRunnerError("git not found") from e
    return result.returncode
