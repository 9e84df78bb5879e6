"""Git platform adapters."""

from prtoolbox.adapters.base import GitPlatformAdapter, GitPlatformError
from prtoolbox.adapters.github import GitHubAdapter

__all__ = ["GitPlatformAdapter", "GitPlatformError", "GitHubAdapter"]
