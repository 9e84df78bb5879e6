"""Abstract base for Git platform adapters."""

from abc import ABC, abstractmethod
from typing import List

from prtoolbox.deadline import Deadline
from prtoolbox.models import ChangedFile, Label, PullRequestDetails


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    pass


class GitPlatformAdapter(ABC):
    """Read-only interface to the hosting platform for one pull request.

    repo is always in format owner/repo.
    """

    @abstractmethod
    def get_pull_request(
        self,
        repo: str,
        pr_number: int,
        deadline: Deadline | None = None,
    ) -> PullRequestDetails:
        """Fetch PR by number."""
        ...

    @abstractmethod
    def list_issue_labels(
        self,
        repo: str,
        pr_number: int,
        deadline: Deadline | None = None,
    ) -> List[Label]:
        """List labels on the PR's issue."""
        ...

    @abstractmethod
    def list_pr_files(
        self,
        repo: str,
        pr_number: int,
        deadline: Deadline | None = None,
    ) -> List[ChangedFile]:
        """List files changed in the PR."""
        ...
