"""Per-commit classification and run-wide counting."""

from dataclasses import dataclass, field
from enum import Enum

import structlog

from trailertally.git.base import CommitRecord

from .identity import MatchMode, TargetIdentitySet, matches
from .trailers import AnnotationKind, classify

logger = structlog.get_logger(__name__)


class AuditError(Exception):
    """Base exception for audit errors."""

    pass


class InvariantViolationError(AuditError):
    """Counters no longer add up to the number of scanned commits."""

    pass


class ReportMode(Enum):
    """Counting policy for a run.

    SINGLE puts every commit in exactly one of authored, touched or
    ignored. MULTI counts trailers independently of authorship and derives
    a residual no-interaction bucket at the end.
    """

    SINGLE = "single"
    MULTI = "multi"


@dataclass(frozen=True)
class ClassificationResult:
    """Classification of a single commit."""

    is_authored_by_target: bool
    annotations_present: frozenset[AnnotationKind]
    message_readable: bool = True


@dataclass
class RunTotals:
    """Counters accumulated over one run."""

    total_scanned: int = 0
    authored: int = 0
    touched: int = 0
    ignored: int = 0
    annotations: dict[AnnotationKind, int] = field(
        default_factory=lambda: {kind: 0 for kind in AnnotationKind}
    )

    @property
    def signed_off(self) -> int:
        return self.annotations[AnnotationKind.SIGNED_OFF_BY]

    @property
    def reviewed(self) -> int:
        return self.annotations[AnnotationKind.REVIEWED_BY]

    @property
    def acked(self) -> int:
        return self.annotations[AnnotationKind.ACKED_BY]

    @property
    def tested(self) -> int:
        return self.annotations[AnnotationKind.TESTED_BY]

    @property
    def reported(self) -> int:
        return self.annotations[AnnotationKind.REPORTED_BY]

    @property
    def no_interaction(self) -> int:
        """Residual bucket for the multi-identity report."""
        involved = self.authored + sum(self.annotations.values())
        return max(0, self.total_scanned - involved)


class CommitClassifier:
    """Classifies commits against a fixed set of target identities."""

    def __init__(self, targets: TargetIdentitySet, mode: MatchMode) -> None:
        self.targets = targets
        self.mode = mode

    def classify_commit(self, commit: CommitRecord) -> ClassificationResult:
        is_authored = matches(commit.author_email, self.targets, self.mode)
        if commit.message is None:
            logger.debug("commit_message_unreadable", sha=commit.sha)
        annotations = classify(
            commit.message,
            self.targets,
            author_email=commit.author_email,
        )
        return ClassificationResult(
            is_authored_by_target=is_authored,
            annotations_present=frozenset(annotations),
            message_readable=commit.message is not None,
        )


class Aggregator:
    """Owns the run totals and updates them one commit at a time."""

    def __init__(
        self,
        classifier: CommitClassifier,
        report_mode: ReportMode = ReportMode.SINGLE,
    ) -> None:
        self.classifier = classifier
        self.report_mode = report_mode
        self._totals = RunTotals()

    @property
    def totals(self) -> RunTotals:
        return self._totals

    def consume(self, commit: CommitRecord) -> ClassificationResult:
        """Count, classify and record one commit.

        The commit is counted as scanned before it is classified.

        Raises:
            InvariantViolationError: If the single-identity buckets stop
                adding up to the scanned total
        """
        totals = self._totals
        totals.total_scanned += 1

        result = self.classifier.classify_commit(commit)

        if result.is_authored_by_target:
            totals.authored += 1
        for kind in result.annotations_present:
            totals.annotations[kind] += 1

        if self.report_mode is ReportMode.SINGLE:
            if not result.is_authored_by_target:
                if result.annotations_present:
                    totals.touched += 1
                else:
                    totals.ignored += 1
            self._check_buckets(commit)

        return result

    def _check_buckets(self, commit: CommitRecord) -> None:
        totals = self._totals
        bucketed = totals.authored + totals.touched + totals.ignored
        if totals.total_scanned != bucketed:
            raise InvariantViolationError(
                f"Counters out of balance after commit {commit.sha}: "
                f"scanned={totals.total_scanned}, "
                f"authored+touched+ignored={bucketed}"
            )
