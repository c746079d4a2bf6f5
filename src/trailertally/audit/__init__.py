"""Commit classification and aggregation engine."""

from .aggregator import (
    Aggregator,
    AuditError,
    ClassificationResult,
    CommitClassifier,
    InvariantViolationError,
    ReportMode,
    RunTotals,
)
from .identity import MatchMode, TargetIdentitySet, matches
from .stream import CommitStream
from .trailers import TRAILER_PREFIXES, AnnotationKind, classify

__all__ = [
    "Aggregator",
    "AnnotationKind",
    "AuditError",
    "ClassificationResult",
    "CommitClassifier",
    "CommitStream",
    "InvariantViolationError",
    "MatchMode",
    "ReportMode",
    "RunTotals",
    "TargetIdentitySet",
    "TRAILER_PREFIXES",
    "classify",
    "matches",
]
