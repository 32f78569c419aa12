"""Git operations: checkout, identity, staging, diff check, commit, push."""

from format_please.services.git._run import GitRunnerError
from format_please.services.git.branches import fetch_and_checkout_branch
from format_please.services.git.commits import commit, configure_identity, diff_cached, stage_files
from format_please.services.git.push_pull import push

__all__ = [
    "GitRunnerError",
    "commit",
    "configure_identity",
    "diff_cached",
    "fetch_and_checkout_branch",
    "push",
    "stage_files",
]
