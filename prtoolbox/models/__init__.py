"""Data models for PR URLs, GitHub users, labels, files and PR records (Pydantic)."""

from prtoolbox.models.changed_file import ChangedFile
from prtoolbox.models.label import Label
from prtoolbox.models.pr_url import PullRequestURL
from prtoolbox.models.pull_request import PullRequestDetails
from prtoolbox.models.record import PRRecord, RecordSource
from prtoolbox.models.user import GitHubUser

__all__ = [
    "ChangedFile",
    "GitHubUser",
    "Label",
    "PRRecord",
    "PullRequestDetails",
    "PullRequestURL",
    "RecordSource",
]
