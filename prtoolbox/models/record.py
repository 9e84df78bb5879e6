"""Aggregated pull request record consumed by the prompt builder."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from prtoolbox.models.changed_file import ChangedFile
from prtoolbox.models.label import Label
from prtoolbox.models.user import GitHubUser


class RecordSource(str, Enum):
    """Which data path produced a PRRecord."""

    LIVE = "live"
    PARTIAL = "partial"
    SYNTHETIC = "synthetic"


class PRRecord(BaseModel):
    """Everything known about one pull request, built fresh per request.

    source tells callers whether the data is real (live), real with some
    sub-fields emptied after a failed call (partial), or the placeholder
    record (synthetic). degraded_fields names the emptied fields and
    fallback_reason explains why the synthetic record was used.
    """

    model_config = ConfigDict(frozen=True)

    repository: str
    pr_number: int
    title: str = ""
    body: str = ""
    state: str = ""
    created_at: datetime = datetime.min
    updated_at: datetime = datetime.min
    additions: int = Field(default=0, ge=0)
    deletions: int = Field(default=0, ge=0)
    changed_files: tuple[ChangedFile, ...] = ()
    labels: tuple[Label, ...] = ()
    author: GitHubUser | None = None
    assignees: tuple[GitHubUser, ...] = ()
    contributors: tuple[GitHubUser, ...] = ()
    source: RecordSource = RecordSource.LIVE
    degraded_fields: tuple[str, ...] = ()
    fallback_reason: str | None = None

    @property
    def is_synthetic(self) -> bool:
        return self.source is RecordSource.SYNTHETIC

    @property
    def is_degraded(self) -> bool:
        """True unless every upstream call returned real data."""
        return self.source is not RecordSource.LIVE
