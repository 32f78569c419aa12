"""Pick the pull request files to format."""

import logging
from typing import Iterable, List

from format_please.adapters.base import GitPlatformAdapter
from format_please.models import FileChange

DEFAULT_EXTENSION = ".md"
FORMATTABLE_STATUSES = frozenset({"added", "modified"})


def filter_files(files: Iterable[FileChange], extension: str = DEFAULT_EXTENSION) -> List[str]:
    """Keep added/modified files whose name ends with extension (case-sensitive).

    Input order is preserved.
    """
    return [f.filename for f in files if f.status in FORMATTABLE_STATUSES and f.filename.endswith(extension)]


def select_files(
    adapter: GitPlatformAdapter,
    repo: str,
    pr_number: int,
    extension: str = DEFAULT_EXTENSION,
    log: logging.Logger | None = None,
) -> List[str]:
    """List every changed file of the pull request and filter it.

    Returns an empty list when nothing matches.
    """
    logger = log or logging.getLogger("format_please.services.file_selector")
    changes = adapter.list_pr_files(repo, pr_number)
    selected = filter_files(changes, extension)
    logger.info(
        "PR #%s: %s changed file(s), %s to format with extension %s",
        pr_number,
        len(changes),
        len(selected),
        extension,
    )
    return selected
