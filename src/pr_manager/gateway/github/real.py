"""Production implementation of GitHub pull request operations."""

import logging

from pr_manager.core.errors import (
    ApprovalError,
    ExternalToolError,
    MergeError,
    PRDecodeError,
    PRNotFoundError,
)
from pr_manager.core.options import MergeStrategy
from pr_manager.gateway.command_runner.abc import CommandRunner
from pr_manager.gateway.github.abc import GitHubGateway
from pr_manager.gateway.github.parsing import parse_pull_request, parse_reviews_response
from pr_manager.gateway.github.types import PR_VIEW_FIELDS, PullRequestRecord, ReviewRecord

logger = logging.getLogger(__name__)

GH = "gh"


def merge_flag_for(strategy: object) -> str:
    """Map a merge strategy to its gh flag.

    Anything that is not a MergeStrategy falls back to the merge-commit flag
    so the merge never runs without a method.
    """
    if isinstance(strategy, MergeStrategy):
        return strategy.flag
    return MergeStrategy.MERGE.flag


def build_merge_args(pr_number: int, strategy: object) -> list[str]:
    return ["pr", "merge", str(pr_number), "--delete-branch=false", merge_flag_for(strategy)]


class RealGitHubGateway(GitHubGateway):
    """Production implementation using gh CLI.

    Every operation runs a gh command through the injected CommandRunner.
    """

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def get_pull_request(self, pr_number: int) -> PullRequestRecord:
        args = ["pr", "view", str(pr_number), "--json", ",".join(PR_VIEW_FIELDS)]
        try:
            out = self._runner.run(GH, args)
        except ExternalToolError as e:
            raise PRNotFoundError(f"PR #{pr_number} not found or inaccessible: {e}") from e

        try:
            return parse_pull_request(out)
        except PRDecodeError:
            logger.debug("Undecodable gh pr view payload: %r", out)
            raise

    def get_reviews(self, pr_number: int) -> list[ReviewRecord]:
        args = ["pr", "view", str(pr_number), "--json", "reviews"]
        try:
            out = self._runner.run(GH, args)
        except ExternalToolError as e:
            raise PRNotFoundError(
                f"failed to fetch reviews for PR #{pr_number}: {e}"
            ) from e
        return list(parse_reviews_response(out))

    def approve(self, pr_number: int) -> None:
        try:
            self._runner.run(GH, ["pr", "review", str(pr_number), "--approve"])
        except ExternalToolError as e:
            raise ApprovalError(f"failed to approve PR #{pr_number}: {e}") from e

    def merge(self, pr_number: int, strategy: MergeStrategy) -> None:
        try:
            self._runner.run(GH, build_merge_args(pr_number, strategy))
        except ExternalToolError as e:
            raise MergeError(f"failed to merge PR #{pr_number}: {e}") from e
