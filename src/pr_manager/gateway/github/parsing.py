"""Parsing utilities for gh CLI JSON output."""

import json
from typing import Any

from pr_manager.core.errors import PRDecodeError
from pr_manager.gateway.github.types import (
    MERGEABILITY_VALUES,
    PR_STATES,
    Mergeability,
    PRState,
    PullRequestRecord,
    ReviewRecord,
)


def _load_object(json_str: str) -> dict[str, Any]:
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise PRDecodeError(f"failed to parse PR response: {e}") from e
    if not isinstance(data, dict):
        raise PRDecodeError("failed to parse PR response: expected a JSON object")
    return data


def _require_str(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise PRDecodeError(f"failed to parse PR response: field {key!r} missing or not a string")
    return value


def _parse_login(author: Any) -> str:
    # gh returns {"login": "..."}; deleted accounts come back as null
    if author is None:
        return ""
    if not isinstance(author, dict) or not isinstance(author.get("login", ""), str):
        raise PRDecodeError("failed to parse PR response: malformed author")
    return author.get("login", "")


def _parse_state(value: str) -> PRState:
    state = value.upper()
    for known in PR_STATES:
        if state == known:
            return known
    raise PRDecodeError(f"failed to parse PR response: unknown state {value!r}")


def _parse_mergeable(value: str) -> Mergeability:
    mergeable = value.upper()
    for known in MERGEABILITY_VALUES:
        if mergeable == known:
            return known
    raise PRDecodeError(f"failed to parse PR response: unknown mergeable value {value!r}")


def parse_reviews(raw_reviews: Any) -> tuple[ReviewRecord, ...]:
    """Parse the "reviews" array of a gh pr view payload.

    Args:
        raw_reviews: Decoded JSON value of the "reviews" key (None is treated as empty)

    Returns:
        Tuple of ReviewRecord in the order gh returned them
    """
    if raw_reviews is None:
        return ()
    if not isinstance(raw_reviews, list):
        raise PRDecodeError("failed to parse PR response: 'reviews' is not a list")

    reviews: list[ReviewRecord] = []
    for raw in raw_reviews:
        if not isinstance(raw, dict):
            raise PRDecodeError("failed to parse PR response: malformed review")
        reviews.append(
            ReviewRecord(
                author=_parse_login(raw.get("author")),
                state=_require_str(raw, "state").upper(),
            )
        )
    return tuple(reviews)


def parse_reviews_response(json_str: str) -> tuple[ReviewRecord, ...]:
    """Parse `gh pr view <n> --json reviews` output."""
    data = _load_object(json_str)
    return parse_reviews(data.get("reviews"))


def parse_pull_request(json_str: str) -> PullRequestRecord:
    """Parse `gh pr view <n> --json number,title,...` output into a PullRequestRecord.

    Args:
        json_str: JSON text from gh

    Returns:
        Decoded PullRequestRecord

    Raises:
        PRDecodeError: If the payload is not valid JSON, a field is missing or
            has the wrong type, the number is not positive, or state/mergeable
            is outside the known values
    """
    data = _load_object(json_str)

    number = data.get("number")
    # bool is an int subclass; reject it explicitly
    if not isinstance(number, int) or isinstance(number, bool) or number <= 0:
        raise PRDecodeError(f"failed to parse PR response: invalid PR number {number!r}")

    return PullRequestRecord(
        number=number,
        title=_require_str(data, "title"),
        state=_parse_state(_require_str(data, "state")),
        url=_require_str(data, "url"),
        author=_parse_login(data.get("author")),
        mergeable=_parse_mergeable(_require_str(data, "mergeable")),
        reviews=parse_reviews(data.get("reviews")),
    )
