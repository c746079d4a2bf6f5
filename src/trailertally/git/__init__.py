"""Repository access for trailertally.

Provides the repository reader capability and its GitPython implementation.
"""

from .base import (
    CommitRecord,
    CommitResolutionError,
    GitReaderError,
    HistoryTraversalError,
    RepositoryNotFoundError,
    RepositoryReader,
)
from .reader import GitPythonReader

__all__ = [
    "GitPythonReader",
    "RepositoryReader",
    "CommitRecord",
    "GitReaderError",
    "RepositoryNotFoundError",
    "HistoryTraversalError",
    "CommitResolutionError",
]
