"""Base classes, dataclasses, and types for repository access."""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import UTC, datetime


class GitReaderError(Exception):
    """Base exception for RepositoryReader errors."""

    pass


class RepositoryNotFoundError(GitReaderError):
    """Repository path is not a valid git repository."""

    pass


class HistoryTraversalError(GitReaderError):
    """The commit history walk could not be initialized."""

    pass


class CommitResolutionError(GitReaderError):
    """A commit referenced by the history walk could not be resolved."""

    pass


@dataclass(frozen=True)
class CommitRecord:
    """Represents one historical commit."""

    sha: str
    author: str
    author_email: str | None  # None when the commit carries no email
    timestamp: int  # Seconds since epoch, UTC
    message: str | None  # None when the message could not be decoded

    @property
    def short_sha(self) -> str:
        return self.sha[:7]

    @property
    def committed_at(self) -> datetime:
        """Commit time as a timezone-aware UTC datetime."""
        return datetime.fromtimestamp(self.timestamp, tz=UTC)

    @property
    def summary(self) -> str | None:
        """First line of the message, or None if there is none."""
        if not self.message:
            return None
        first_line = self.message.strip().split("\n", 1)[0].strip()
        return first_line or None


class RepositoryReader(ABC):
    """Abstract base class for repository readers."""

    @abstractmethod
    def __init__(self, repo_path: str) -> None:
        pass

    @abstractmethod
    def iter_commits(self) -> Iterator[CommitRecord]:
        """Yield commits reachable from HEAD, most recent first."""
        pass

    @abstractmethod
    def get_repo_root(self) -> str:
        pass
