"""Fake GitHub pull request operations for testing."""

from pr_manager.core.errors import ApprovalError, MergeError, PRNotFoundError
from pr_manager.core.options import MergeStrategy
from pr_manager.gateway.github.abc import GitHubGateway
from pr_manager.gateway.github.types import PullRequestRecord, ReviewRecord


class FakeGitHubGateway(GitHubGateway):
    """In-memory fake implementation of GitHub pull request operations.

    This class has NO public setup methods. All state is provided via constructor
    using keyword arguments with sensible defaults.
    """

    def __init__(
        self,
        *,
        pull_requests: dict[int, PullRequestRecord] | None = None,
        reviews: dict[int, list[ReviewRecord]] | None = None,
        reviews_query_fails: bool = False,
        approve_should_succeed: bool = True,
        merge_should_succeed: bool = True,
    ) -> None:
        """Create FakeGitHubGateway with pre-configured state.

        Args:
            pull_requests: Mapping of PR number to the record returned by get_pull_request()
            reviews: Mapping of PR number to reviews returned by get_reviews().
                Defaults to the reviews stored on the matching record.
            reviews_query_fails: If True, get_reviews() raises PRNotFoundError
            approve_should_succeed: If False, approve() raises ApprovalError
            merge_should_succeed: If False, merge() raises MergeError
        """
        self._pull_requests = pull_requests if pull_requests is not None else {}
        self._reviews = reviews if reviews is not None else {}
        self._reviews_query_fails = reviews_query_fails
        self._approve_should_succeed = approve_should_succeed
        self._merge_should_succeed = merge_should_succeed
        self._fetched_prs: list[int] = []
        self._review_queries: list[int] = []
        self._approved_prs: list[int] = []
        self._merged_prs: list[tuple[int, MergeStrategy]] = []

    def get_pull_request(self, pr_number: int) -> PullRequestRecord:
        self._fetched_prs.append(pr_number)
        if pr_number not in self._pull_requests:
            raise PRNotFoundError(f"PR #{pr_number} not found or inaccessible")
        return self._pull_requests[pr_number]

    def get_reviews(self, pr_number: int) -> list[ReviewRecord]:
        self._review_queries.append(pr_number)
        if self._reviews_query_fails:
            raise PRNotFoundError(f"failed to fetch reviews for PR #{pr_number}")
        if pr_number in self._reviews:
            return list(self._reviews[pr_number])
        if pr_number in self._pull_requests:
            return list(self._pull_requests[pr_number].reviews)
        return []

    def approve(self, pr_number: int) -> None:
        if not self._approve_should_succeed:
            raise ApprovalError(f"failed to approve PR #{pr_number}")
        self._approved_prs.append(pr_number)

    def merge(self, pr_number: int, strategy: MergeStrategy) -> None:
        if not self._merge_should_succeed:
            raise MergeError(f"failed to merge PR #{pr_number}")
        self._merged_prs.append((pr_number, strategy))

    @property
    def fetched_prs(self) -> list[int]:
        """PR numbers passed to get_pull_request(), in call order."""
        return list(self._fetched_prs)

    @property
    def review_queries(self) -> list[int]:
        return list(self._review_queries)

    @property
    def approved_prs(self) -> list[int]:
        """PR numbers successfully approved."""
        return list(self._approved_prs)

    @property
    def merged_prs(self) -> list[tuple[int, MergeStrategy]]:
        """(PR number, strategy) pairs successfully merged."""
        return list(self._merged_prs)
