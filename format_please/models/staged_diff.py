"""Result of comparing the index with HEAD."""

from enum import Enum


class StagedDiff(str, Enum):
    """Whether staged content differs from HEAD.

    Decoded from the exit code of ``git diff --cached --quiet``: 0 means
    UNCHANGED, 1 means CHANGED. Both are normal outcomes.
    """

    UNCHANGED = "unchanged"
    CHANGED = "changed"

    @property
    def changed(self) -> bool:
        return self is StagedDiff.CHANGED
