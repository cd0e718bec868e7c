"""Review and merge orchestration.

The composer runs a strict linear pipeline:

    validate environment -> fetch PR once -> guard OPEN -> review -> merge

Every failure raises a PrManagerError and aborts the pass. Guards run before
any mutating gh call, so a failed guard never leaves partial remote state.
A declined prompt is a successful outcome, not an error.
"""

import logging
from enum import Enum

from pr_manager.core.environment import EnvironmentValidator
from pr_manager.core.errors import ConflictError, NotOpenError, PrManagerError
from pr_manager.core.options import MergeStrategy, WorkflowOptions
from pr_manager.gateway.console.abc import Console
from pr_manager.gateway.github.abc import GitHubGateway
from pr_manager.gateway.github.types import PullRequestRecord, has_approval

logger = logging.getLogger(__name__)


class ReviewOutcome(Enum):
    APPROVED = "approved"
    ALREADY_APPROVED = "already_approved"
    CANCELLED = "cancelled"


class MergeOutcome(Enum):
    MERGED = "merged"
    CANCELLED = "cancelled"


def ensure_open(pr: PullRequestRecord) -> None:
    if not pr.is_open:
        raise NotOpenError(f"PR #{pr.number} is not open (current state: {pr.state})")


def ensure_no_conflicts(pr: PullRequestRecord) -> None:
    if pr.has_conflicts:
        raise ConflictError(
            f"PR #{pr.number} has merge conflicts - resolve them before merging"
        )


class ReviewOrchestrator:
    """Approves a PR unless an approval already exists.

    Assumes the caller has already checked that the PR is OPEN.
    """

    def __init__(self, github: GitHubGateway, console: Console, options: WorkflowOptions) -> None:
        self._github = github
        self._console = console
        self._options = options

    def _is_already_approved(self, pr_number: int) -> bool:
        # Fails open: a query error is reported and treated as "not approved"
        try:
            reviews = self._github.get_reviews(pr_number)
        except PrManagerError as e:
            logger.debug("Review query failed for PR #%d: %s", pr_number, e)
            self._console.warning(f"Could not check existing reviews: {e}")
            return False
        return has_approval(reviews)

    def run(self, pr: PullRequestRecord) -> ReviewOutcome:
        if self._is_already_approved(pr.number):
            self._console.warning(f"PR #{pr.number} is already approved - skipping approval")
            return ReviewOutcome.ALREADY_APPROVED

        if not self._options.auto:
            if not self._console.confirm(f'Approve PR #{pr.number} ("{pr.title}")?'):
                self._console.info("Review cancelled by user")
                return ReviewOutcome.CANCELLED

        self._console.info(f"Approving PR #{pr.number}...")
        self._github.approve(pr.number)
        self._console.success(f"PR #{pr.number} approved")
        return ReviewOutcome.APPROVED


class MergeOrchestrator:
    """Merges a PR after checking its state and mergeability."""

    def __init__(self, github: GitHubGateway, console: Console, options: WorkflowOptions) -> None:
        self._github = github
        self._console = console
        self._options = options

    def run(
        self, pr: PullRequestRecord, strategy: MergeStrategy, *, confirm: bool = True
    ) -> MergeOutcome:
        """Merge pr with strategy.

        Args:
            pr: Record fetched at the start of the workflow
            strategy: Merge strategy to apply
            confirm: If False, skip this orchestrator's own prompt (the caller
                has already asked). Automatic mode never prompts.

        Raises:
            NotOpenError: If the PR is not OPEN
            ConflictError: If the PR is CONFLICTING
            MergeError: If gh rejects the merge
        """
        ensure_open(pr)
        ensure_no_conflicts(pr)

        if confirm and not self._options.auto:
            prompt = f'Merge PR #{pr.number} ("{pr.title}") using "{strategy.display}" method?'
            if not self._console.confirm(prompt):
                self._console.info("Merge cancelled by user")
                return MergeOutcome.CANCELLED

        self._console.info(f'Merging PR #{pr.number} using "{strategy.display}" method...')
        self._github.merge(pr.number, strategy)
        self._console.success(f"PR #{pr.number} merged")
        return MergeOutcome.MERGED


class WorkflowComposer:
    """Entry points for the review-only, merge-only and full workflows.

    Each entry point validates the environment and fetches the PR itself, so
    none depends on another having run in the same process.
    """

    def __init__(
        self,
        validator: EnvironmentValidator,
        github: GitHubGateway,
        console: Console,
        options: WorkflowOptions,
    ) -> None:
        self._validator = validator
        self._github = github
        self._console = console
        self._options = options
        self._reviewer = ReviewOrchestrator(github, console, options)
        self._merger = MergeOrchestrator(github, console, options)

    def _debug(self, message: str) -> None:
        if self._options.verbose:
            self._console.debug(message)

    def _prepare(self, pr_number: int) -> PullRequestRecord:
        self._validator.validate()

        self._console.info(f"Fetching PR #{pr_number}...")
        pr = self._github.get_pull_request(pr_number)

        self._debug(f"Title:     {pr.title}")
        self._debug(f"State:     {pr.state}")
        self._debug(f"Author:    {pr.author}")
        self._debug(f"URL:       {pr.url}")
        self._debug(f"Mergeable: {pr.mergeable}")
        self._debug(f"Reviews:   {len(pr.reviews)}")
        self._debug(f"Strategy:  {self._options.merge_strategy.display}")

        ensure_open(pr)
        return pr

    def review(self, pr_number: int) -> int:
        self._console.header("PR Review")
        pr = self._prepare(pr_number)
        self._reviewer.run(pr)
        return 0

    def merge(self, pr_number: int) -> int:
        self._console.header("PR Merge")
        pr = self._prepare(pr_number)
        ensure_no_conflicts(pr)
        self._merger.run(pr, self._options.merge_strategy)
        return 0

    def full(self, pr_number: int) -> int:
        self._console.header("Full PR Workflow (review + merge)")
        pr = self._prepare(pr_number)

        if self._reviewer.run(pr) is ReviewOutcome.CANCELLED:
            return 0

        # The record fetched above is reused; state is not re-checked remotely
        if not self._options.auto:
            if not self._console.confirm(f"Proceed with merge for PR #{pr.number}?"):
                self._console.info("Merge cancelled by user")
                return 0

        self._merger.run(pr, self._options.merge_strategy, confirm=False)
        self._console.success(f"Full workflow complete: PR #{pr.number} reviewed and merged")
        return 0
