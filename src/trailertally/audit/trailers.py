"""Commit message trailer classification.

Trailers are the ``Kind-by: Name <email>`` lines at the end of a commit
message that record review, test and endorsement actions.
"""

import re
from enum import Enum

from .identity import TargetIdentitySet


class AnnotationKind(Enum):
    """Recognized trailer kinds."""

    SIGNED_OFF_BY = "signed_off"
    REVIEWED_BY = "reviewed"
    ACKED_BY = "acked"
    TESTED_BY = "tested"
    REPORTED_BY = "reported"


# Tested in this order; a line is classified under the first prefix it has.
TRAILER_PREFIXES: tuple[tuple[str, AnnotationKind], ...] = (
    ("signed-off-by:", AnnotationKind.SIGNED_OFF_BY),
    ("reviewed-by:", AnnotationKind.REVIEWED_BY),
    ("acked-by:", AnnotationKind.ACKED_BY),
    ("tested-by:", AnnotationKind.TESTED_BY),
    ("reported-by:", AnnotationKind.REPORTED_BY),
)


_ANGLE_ADDRESS = re.compile(r"<([^>]*)>")


def trailer_address(line: str) -> str:
    """Address a trailer line refers to.

    Uses the `<...>` part when present, otherwise the last token after the
    colon.
    """
    found = _ANGLE_ADDRESS.search(line)
    if found:
        return found.group(1).strip()
    value = line.partition(":")[2].split()
    return value[-1] if value else ""


def parse_trailer_kind(line: str) -> AnnotationKind | None:
    """Return the kind of a trimmed, lower-cased line, or None."""
    for prefix, kind in TRAILER_PREFIXES:
        if line.startswith(prefix):
            return kind
    return None


def classify(
    message: str | None,
    targets: TargetIdentitySet,
    *,
    author_email: str | None = None,
) -> set[AnnotationKind]:
    """Collect the trailer kinds in a message that reference a target.

    Relevance is always a case-insensitive substring test against the
    targets, independent of the run's author matching mode. Each kind is
    latched at most once per message.

    Args:
        message: Full commit message, or None if it could not be read
        targets: Identities being audited
        author_email: Commit author's email. Lines whose address is
            exactly this email are self-referential and are skipped.

    Returns:
        The set of latched kinds; empty for an absent message.
    """
    latched: set[AnnotationKind] = set()
    if message is None:
        return latched

    own_email = author_email.lower() if author_email else None

    for raw_line in message.splitlines():
        line = raw_line.strip().lower()
        kind = parse_trailer_kind(line)
        if kind is None or kind in latched:
            continue
        if not targets.found_in(line):
            continue
        if own_email and trailer_address(line) == own_email:
            continue
        latched.add(kind)

    return latched
