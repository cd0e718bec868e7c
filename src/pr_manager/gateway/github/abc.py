"""Abstract base class for GitHub pull request operations."""

from abc import ABC, abstractmethod

from pr_manager.core.options import MergeStrategy
from pr_manager.gateway.github.types import PullRequestRecord, ReviewRecord


class GitHubGateway(ABC):
    """Abstract interface for the pull request operations pr-manager needs.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def get_pull_request(self, pr_number: int) -> PullRequestRecord:
        """Fetch PR metadata.

        Args:
            pr_number: Positive PR number

        Returns:
            PullRequestRecord snapshot

        Raises:
            PRNotFoundError: If the PR does not exist or is not accessible
            PRDecodeError: If the response cannot be decoded
        """
        ...

    @abstractmethod
    def get_reviews(self, pr_number: int) -> list[ReviewRecord]:
        """Fetch the reviews currently submitted on a PR.

        Raises:
            PrManagerError: If the query fails or cannot be decoded
        """
        ...

    @abstractmethod
    def approve(self, pr_number: int) -> None:
        """Submit an approving review.

        Raises:
            ApprovalError: If gh rejects the approval
        """
        ...

    @abstractmethod
    def merge(self, pr_number: int, strategy: MergeStrategy) -> None:
        """Merge a PR with the given strategy, keeping the source branch.

        Raises:
            MergeError: If gh rejects the merge
        """
        ...
