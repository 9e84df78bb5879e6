"""Pull request details from the primary "get pull request" call."""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field

from prtoolbox.models.user import GitHubUser


class PullRequestDetails(BaseModel):
    """Subset of the GitHub pull request payload used for descriptions."""

    number: int
    title: str = ""
    body: str = ""
    state: str = ""
    created_at: datetime = datetime.min
    updated_at: datetime = datetime.min
    additions: int = Field(default=0, ge=0)
    deletions: int = Field(default=0, ge=0)
    author: GitHubUser | None = None
    assignees: List[GitHubUser] = Field(default_factory=list)
