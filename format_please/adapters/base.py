"""Abstract base for Git platform adapters."""

from abc import ABC, abstractmethod
from typing import List

from format_please.models import FileChange, Issue, PullRequestContext


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    pass


class GitPlatformAdapter(ABC):
    """Interface the pipeline needs from a Git hosting platform."""

    @abstractmethod
    def get_issue(self, repo: str, issue_number: int) -> Issue:
        """Fetch issue by number (issues and pull requests share numbers)."""
        ...

    @abstractmethod
    def get_pr_by_url(self, pr_url: str) -> PullRequestContext:
        """Fetch pull request by its API URL."""
        ...

    @abstractmethod
    def list_pr_files(self, repo: str, pr_number: int) -> List[FileChange]:
        """List every file changed in a pull request (all pages)."""
        ...

    @abstractmethod
    def create_comment_reaction(self, repo: str, comment_id: int, content: str) -> None:
        """Add a reaction (e.g. eyes) to an issue comment."""
        ...

    @abstractmethod
    def create_comment(self, repo: str, issue_number: int, body: str) -> None:
        """Post a comment on an issue or pull request."""
        ...
