"""Data models for comment events, pull requests and changed files (Pydantic)."""

from format_please.models.command import Command
from format_please.models.comment_event import CommentEvent
from format_please.models.file_change import FileChange
from format_please.models.issue import Issue
from format_please.models.pull_request import PullRequestContext
from format_please.models.staged_diff import StagedDiff

__all__ = [
    "Command",
    "CommentEvent",
    "FileChange",
    "Issue",
    "PullRequestContext",
    "StagedDiff",
]
