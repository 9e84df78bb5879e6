"""Fixed placeholder PR record for demo mode and upstream failures."""

from datetime import UTC, datetime, timedelta
from typing import Callable

from prtoolbox.deadline import Deadline
from prtoolbox.models import ChangedFile, GitHubUser, Label, PRRecord, RecordSource
from prtoolbox.sources.base import PRDataSource

SAMPLE_AVATAR_URL = "https://github.com/images/error/octocat_happy.gif"
NO_TOKEN_REASON = "GitHub token not configured"


def _utcnow() -> datetime:
    return datetime.now(UTC)


def synthetic_record(
    owner: str,
    repo: str,
    number: int,
    now: datetime,
    reason: str | None = None,
) -> PRRecord:
    """Build the placeholder record; only repository, number and the
    timestamps (now - 24h, now) depend on the arguments."""
    return PRRecord(
        repository=f"{owner}/{repo}",
        pr_number=number,
        title="Sample Pull Request",
        body="This is a sample pull request description for testing purposes.",
        state="open",
        created_at=now - timedelta(hours=24),
        updated_at=now,
        additions=15,
        deletions=2,
        changed_files=(
            ChangedFile(filename="main.go", additions=10, deletions=2, changes=12),
            ChangedFile(filename="README.md", additions=5, deletions=0, changes=5),
        ),
        labels=(
            Label(name="enhancement", color="a2eeef"),
            Label(name="documentation", color="0075ca"),
        ),
        author=GitHubUser(login="sample-user", id=12345, avatar_url=SAMPLE_AVATAR_URL),
        assignees=(GitHubUser(login="reviewer1", id=67890, avatar_url=SAMPLE_AVATAR_URL),),
        contributors=(),
        source=RecordSource.SYNTHETIC,
        fallback_reason=reason,
    )


class SyntheticPRSource(PRDataSource):
    """Data source that never touches the network."""

    def __init__(
        self,
        reason: str | None = NO_TOKEN_REASON,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self.reason = reason
        self._clock = clock

    def fetch(
        self,
        owner: str,
        repo: str,
        number: int,
        deadline: Deadline | None = None,
    ) -> PRRecord:
        return synthetic_record(owner, repo, number, self._clock(), self.reason)
