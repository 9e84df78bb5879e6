"""File changed in a pull request."""

from pydantic import BaseModel, Field


class ChangedFile(BaseModel):
    """One entry of the PR files list.

    changes is the total number of changed lines (GitHub "changes").
    """

    filename: str
    additions: int = Field(default=0, ge=0)
    deletions: int = Field(default=0, ge=0)
    changes: int = Field(default=0, ge=0)
