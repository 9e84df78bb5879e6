"""PR data source backed by the GitHub REST API.

Fetch order: the pull request itself first, then labels and changed files
concurrently. A failed primary call falls back to the synthetic record; a
failed labels/files call only empties that field.
"""

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError
from typing import Any

from prtoolbox.adapters.base import GitPlatformAdapter, GitPlatformError
from prtoolbox.deadline import Deadline, DeadlineExceeded
from prtoolbox.models import PRRecord, RecordSource
from prtoolbox.sources.base import PRDataSource
from prtoolbox.sources.synthetic import SyntheticPRSource

LOG = logging.getLogger("prtoolbox.sources.github")

_ABSORBED = (GitPlatformError, DeadlineExceeded, FuturesTimeoutError)


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


class GitHubPRSource(PRDataSource):
    """Aggregates one PR from three GitHub calls without ever raising."""

    def __init__(
        self,
        adapter: GitPlatformAdapter,
        fallback: SyntheticPRSource | None = None,
    ) -> None:
        self._adapter = adapter
        self._fallback = fallback or SyntheticPRSource(reason=None)

    def fetch(
        self,
        owner: str,
        repo: str,
        number: int,
        deadline: Deadline | None = None,
    ) -> PRRecord:
        repository = f"{owner}/{repo}"
        try:
            pr = self._adapter.get_pull_request(repository, number, deadline)
        except (GitPlatformError, DeadlineExceeded) as e:
            LOG.warning("Error fetching PR %s#%s, using synthetic data: %s", repository, number, e)
            record = self._fallback.fetch(owner, repo, number, deadline)
            return record.model_copy(update={"fallback_reason": _describe(e)})

        fields = self._fetch_secondary(repository, number, deadline)
        degraded = tuple(name for name, value in fields.items() if value is None)
        contributors = (pr.author,) if pr.author is not None else ()

        return PRRecord(
            repository=repository,
            pr_number=number,
            title=pr.title,
            body=pr.body,
            state=pr.state,
            created_at=pr.created_at,
            updated_at=pr.updated_at,
            additions=pr.additions,
            deletions=pr.deletions,
            changed_files=tuple(fields["changed_files"] or ()),
            labels=tuple(fields["labels"] or ()),
            author=pr.author,
            assignees=tuple(pr.assignees),
            contributors=contributors,
            source=RecordSource.PARTIAL if degraded else RecordSource.LIVE,
            degraded_fields=degraded,
        )

    def _fetch_secondary(
        self,
        repository: str,
        number: int,
        deadline: Deadline | None,
    ) -> dict[str, Any]:
        """Run labels and files calls in parallel; None marks a failed field."""
        executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="prtoolbox-fetch")
        try:
            futures: dict[str, Future] = {
                "labels": executor.submit(self._adapter.list_issue_labels, repository, number, deadline),
                "changed_files": executor.submit(self._adapter.list_pr_files, repository, number, deadline),
            }
            results: dict[str, Any] = {}
            for name, future in futures.items():
                wait = deadline.remaining() if deadline is not None else None
                try:
                    results[name] = future.result(timeout=wait)
                except _ABSORBED as e:
                    LOG.warning("Error fetching %s for %s#%s: %s", name, repository, number, _describe(e))
                    results[name] = None
            return results
        finally:
            # Threads still blocked on I/O end by their own request timeout
            executor.shutdown(wait=False, cancel_futures=True)
