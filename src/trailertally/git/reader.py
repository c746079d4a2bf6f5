"""GitPython-based implementation of RepositoryReader."""

from collections.abc import Iterator
from pathlib import Path

import git
import structlog
from git.exc import BadName, BadObject

from .base import (
    CommitRecord,
    CommitResolutionError,
    HistoryTraversalError,
    RepositoryNotFoundError,
    RepositoryReader,
)

logger = structlog.get_logger(__name__)


class GitPythonReader(RepositoryReader):
    """GitPython-based implementation of RepositoryReader."""

    def __init__(self, repo_path: str) -> None:
        try:
            self.repo = git.Repo(repo_path)
            self.repo_path = Path(repo_path).resolve()
        except (git.InvalidGitRepositoryError, git.NoSuchPathError) as e:
            raise RepositoryNotFoundError(
                f"Failed to open git repository at {repo_path}"
            ) from e
        logger.debug("repository_opened", repo_path=str(self.repo_path))

    def get_repo_root(self) -> str:
        return str(self.repo_path)

    def iter_commits(self) -> Iterator[CommitRecord]:
        """Walk history from HEAD, most recent first.

        An unborn HEAD (no commits yet) yields nothing; a HEAD that points
        at a missing commit is an error.

        Raises:
            HistoryTraversalError: If the walk cannot be started
            CommitResolutionError: If a commit in the walk cannot be read
        """
        if not self._head_is_valid():
            if self._head_is_unborn():
                logger.info("empty_repository", repo_path=str(self.repo_path))
                return
            raise HistoryTraversalError(
                f"Failed to find HEAD: {self.repo.head.path} does not resolve "
                "to a commit"
            )

        try:
            commit_iter = self.repo.iter_commits("HEAD")
        except (git.GitCommandError, ValueError) as e:
            raise HistoryTraversalError(
                f"Failed to initialize revision walker: {e}"
            ) from e

        while True:
            try:
                git_commit = next(commit_iter)
            except StopIteration:
                return
            except (git.GitCommandError, BadName, BadObject, ValueError) as e:
                raise CommitResolutionError(f"Failed to find commit: {e}") from e

            try:
                record = self._to_record(git_commit)
            except (BadName, BadObject, ValueError) as e:
                raise CommitResolutionError(
                    f"Failed to find commit {git_commit.hexsha}: {e}"
                ) from e
            yield record

    def _head_is_valid(self) -> bool:
        try:
            return self.repo.head.is_valid()
        except (BadName, BadObject):
            return False

    def _head_is_unborn(self) -> bool:
        """True when HEAD names a branch that has no ref yet."""
        head = self.repo.head
        try:
            if head.is_detached:
                return False
            branch = head.reference.path
        except (TypeError, ValueError):
            return False
        return branch not in {ref.path for ref in self.repo.references}

    def _to_record(self, git_commit: git.Commit) -> CommitRecord:
        message: str | None
        raw_message = git_commit.message
        if isinstance(raw_message, str):
            message = raw_message
        else:
            try:
                message = raw_message.decode("utf-8")
            except UnicodeDecodeError:
                logger.debug("commit_message_unreadable", sha=git_commit.hexsha)
                message = None

        return CommitRecord(
            sha=git_commit.hexsha,
            author=git_commit.author.name or "Unknown",
            author_email=git_commit.author.email or None,
            timestamp=git_commit.committed_date,
            message=message,
        )
