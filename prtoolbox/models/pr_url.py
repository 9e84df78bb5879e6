"""Parsed pull request URL."""

from pydantic import BaseModel, ConfigDict, Field


class PullRequestURL(BaseModel):
    """Owner, repository and number extracted from a GitHub PR URL.

    Built only by prtoolbox.url_parser.parse_pr_url.
    """

    model_config = ConfigDict(frozen=True)

    owner: str = Field(min_length=1)
    repo: str = Field(min_length=1)
    number: int = Field(gt=0)

    @property
    def repository(self) -> str:
        """Repository in format owner/repo."""
        return f"{self.owner}/{self.repo}"
