"""Git platform adapters."""

from format_please.adapters.base import GitPlatformAdapter, GitPlatformError
from format_please.adapters.github import GitHubAdapter

__all__ = ["GitPlatformAdapter", "GitPlatformError", "GitHubAdapter"]
