"""GitHub user (author, assignee, contributor) model."""

from pydantic import BaseModel


class GitHubUser(BaseModel):
    """GitHub account as returned in PR payloads."""

    login: str
    id: int = 0
    avatar_url: str = ""
