"""Commit stream with an optional time cutoff."""

from collections.abc import Iterator
from datetime import datetime

import structlog

from trailertally.git.base import CommitRecord, RepositoryReader

logger = structlog.get_logger(__name__)


class CommitStream:
    """Lazy, single-use walk over a repository's history.

    Commits arrive most recent first. When a cutoff is set, the first commit
    strictly older than it ends the walk; commits at or after the cutoff are
    emitted.
    """

    def __init__(
        self,
        reader: RepositoryReader,
        since: datetime | None = None,
    ) -> None:
        self.reader = reader
        self.cutoff: int | None = int(since.timestamp()) if since else None
        self.emitted = 0
        self._consumed = False

    def __iter__(self) -> Iterator[CommitRecord]:
        if self._consumed:
            raise RuntimeError("CommitStream can only be iterated once")
        self._consumed = True
        return self._walk()

    def _walk(self) -> Iterator[CommitRecord]:
        for commit in self.reader.iter_commits():
            if self.cutoff is not None and commit.timestamp < self.cutoff:
                logger.debug(
                    "cutoff_reached",
                    sha=commit.sha,
                    timestamp=commit.timestamp,
                    cutoff=self.cutoff,
                )
                return
            self.emitted += 1
            yield commit
