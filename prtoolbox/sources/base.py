"""Abstract PR data source."""

from abc import ABC, abstractmethod

from prtoolbox.deadline import Deadline
from prtoolbox.models import PRRecord


class PRDataSource(ABC):
    """Produces a PRRecord for (owner, repo, number).

    Implementations never raise for upstream problems; they degrade to
    empty fields or to the synthetic record and tag the result via
    PRRecord.source.
    """

    @abstractmethod
    def fetch(
        self,
        owner: str,
        repo: str,
        number: int,
        deadline: Deadline | None = None,
    ) -> PRRecord:
        """Return the aggregated record for one pull request."""
        ...
