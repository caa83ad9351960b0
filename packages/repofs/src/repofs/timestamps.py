"""Last-modified time from commit history."""

import logging
from datetime import datetime, timezone

from .models import RepositoryReference
from .services import CommitsService

logger = logging.getLogger(__name__)


def parse_commit_date(value: str) -> int:
    """Convert an ISO-8601 committer date to epoch seconds.

    Raises:
        ValueError: if the string is not a date
    """
    parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return int(parsed.timestamp())


class TimestampResolver:
    """Resolves a path's last-modified time from its most recent commit."""

    def __init__(self, repository: RepositoryReference, commits: CommitsService):
        self.repository = repository
        self.commits = commits

    def resolve_timestamp(self, path: str) -> int:
        """
        Get the committer date of the latest commit touching a path.

        Args:
            path: Path in repository

        Returns:
            Epoch seconds, or 0 if no commit or no usable date was found
        """
        records = self.commits.list(
            self.repository.owner,
            self.repository.repository,
            page=1,
            path=path,
            per_page=1,
            reference=self.repository.reference,
        )
        if not records or not records[0].committer_date:
            logger.debug("No commit date for %s", path)
            return 0

        date = records[0].committer_date
        try:
            return parse_commit_date(date)
        except (TypeError, ValueError) as e:
            logger.debug("Unparseable commit date %r for %s: %s", date, path, e)
            return 0
