"""Type definitions for GitHub pull request state."""

from dataclasses import dataclass
from typing import Literal

PRState = Literal["OPEN", "CLOSED", "MERGED"]
PR_STATES: tuple[PRState, ...] = ("OPEN", "CLOSED", "MERGED")

# Matches gh's "mergeable" field
Mergeability = Literal["MERGEABLE", "CONFLICTING", "UNKNOWN"]
MERGEABILITY_VALUES: tuple[Mergeability, ...] = ("MERGEABLE", "CONFLICTING", "UNKNOWN")

APPROVED_REVIEW_STATE = "APPROVED"

# Fields requested from `gh pr view --json`
PR_VIEW_FIELDS = ("number", "title", "state", "url", "mergeable", "author", "reviews")


@dataclass(frozen=True)
class ReviewRecord:
    """A single review submitted on a pull request."""

    author: str
    state: str  # "APPROVED", "CHANGES_REQUESTED", "COMMENTED", "DISMISSED", "PENDING"

    @property
    def is_approval(self) -> bool:
        return self.state == APPROVED_REVIEW_STATE


@dataclass(frozen=True)
class PullRequestRecord:
    """Snapshot of a pull request, fetched once per workflow invocation."""

    number: int
    title: str
    state: PRState
    url: str
    author: str
    mergeable: Mergeability
    reviews: tuple[ReviewRecord, ...] = ()

    @property
    def is_open(self) -> bool:
        return self.state == "OPEN"

    @property
    def has_conflicts(self) -> bool:
        return self.mergeable == "CONFLICTING"


def has_approval(reviews: tuple[ReviewRecord, ...] | list[ReviewRecord]) -> bool:
    """Return True if any review is in the APPROVED state."""
    return any(review.is_approval for review in reviews)
