"""Target identity matching."""

from collections.abc import Iterable, Iterator
from enum import Enum


class MatchMode(Enum):
    """How an author email is compared against the target identities."""

    EXACT = "exact"
    SUBSTRING = "substring"


class TargetIdentitySet:
    """Ordered, immutable collection of lower-cased target identities."""

    __slots__ = ("_identities",)

    def __init__(self, identities: Iterable[str]) -> None:
        lowered = tuple(identity.strip().lower() for identity in identities)
        lowered = tuple(identity for identity in lowered if identity)
        if not lowered:
            raise ValueError("At least one target identity is required")
        self._identities = lowered

    def __iter__(self) -> Iterator[str]:
        return iter(self._identities)

    def __len__(self) -> int:
        return len(self._identities)

    def __repr__(self) -> str:
        return f"TargetIdentitySet({list(self._identities)!r})"

    def found_in(self, text: str) -> bool:
        """Check whether any target occurs in already lower-cased text."""
        return any(identity in text for identity in self._identities)


def matches(
    candidate_email: str | None,
    targets: TargetIdentitySet,
    mode: MatchMode,
) -> bool:
    """Decide whether an email refers to one of the targets.

    Comparison is case-insensitive. In EXACT mode the candidate must equal a
    target; in SUBSTRING mode it must contain one. Which target matched is
    not reported.
    """
    if candidate_email is None:
        return False

    candidate = candidate_email.lower()
    if mode is MatchMode.EXACT:
        return any(candidate == identity for identity in targets)
    return targets.found_in(candidate)
