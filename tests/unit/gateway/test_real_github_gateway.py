"""Tests for RealGitHubGateway driven by a scripted FakeCommandRunner."""

import pytest

from pr_manager.core.errors import (
    ApprovalError,
    MergeError,
    PRDecodeError,
    PRNotFoundError,
)
from pr_manager.core.options import MergeStrategy
from pr_manager.gateway.command_runner.fake import FakeCommandRunner
from pr_manager.gateway.github.real import RealGitHubGateway, build_merge_args, merge_flag_for
from tests.test_utils.builders import pr_view_payload, reviews_payload

VIEW_42 = (
    "gh",
    "pr",
    "view",
    "42",
    "--json",
    "number,title,state,url,mergeable,author,reviews",
)
REVIEWS_42 = ("gh", "pr", "view", "42", "--json", "reviews")


def test_get_pull_request_requests_all_fields() -> None:
    runner = FakeCommandRunner(responses={VIEW_42: pr_view_payload(42)})
    github = RealGitHubGateway(runner)

    pr = github.get_pull_request(42)

    assert pr.number == 42
    assert runner.commands == [VIEW_42]


def test_get_pull_request_failure_is_not_found() -> None:
    runner = FakeCommandRunner(failures={VIEW_42: "GraphQL: Could not resolve to a PullRequest"})
    github = RealGitHubGateway(runner)

    with pytest.raises(PRNotFoundError) as exc_info:
        github.get_pull_request(42)

    assert "PR #42 not found or inaccessible" in str(exc_info.value)
    assert "Could not resolve" in str(exc_info.value)


def test_get_pull_request_bad_payload_is_decode_error() -> None:
    runner = FakeCommandRunner(responses={VIEW_42: pr_view_payload(42, state="WEIRD")})

    with pytest.raises(PRDecodeError):
        RealGitHubGateway(runner).get_pull_request(42)


def test_get_reviews() -> None:
    runner = FakeCommandRunner(responses={REVIEWS_42: reviews_payload("APPROVED")})

    reviews = RealGitHubGateway(runner).get_reviews(42)

    assert [r.state for r in reviews] == ["APPROVED"]
    assert runner.commands == [REVIEWS_42]


def test_approve_runs_gh_pr_review() -> None:
    runner = FakeCommandRunner()

    RealGitHubGateway(runner).approve(42)

    assert runner.commands == [("gh", "pr", "review", "42", "--approve")]


def test_approve_failure() -> None:
    approve = ("gh", "pr", "review", "42", "--approve")
    runner = FakeCommandRunner(failures={approve: "Can not approve your own pull request"})

    with pytest.raises(ApprovalError, match="Can not approve your own pull request"):
        RealGitHubGateway(runner).approve(42)


@pytest.mark.parametrize(
    ("strategy", "flag"),
    [
        (MergeStrategy.MERGE, "--merge"),
        (MergeStrategy.SQUASH, "--squash"),
        (MergeStrategy.REBASE, "--rebase"),
        (MergeStrategy.AUTO, "--auto"),
    ],
)
def test_merge_passes_strategy_flag_and_keeps_branch(strategy: MergeStrategy, flag: str) -> None:
    runner = FakeCommandRunner()

    RealGitHubGateway(runner).merge(42, strategy)

    assert runner.commands == [("gh", "pr", "merge", "42", "--delete-branch=false", flag)]


def test_merge_failure() -> None:
    merge = ("gh", "pr", "merge", "42", "--delete-branch=false", "--merge")
    runner = FakeCommandRunner(failures={merge: "Pull request is not mergeable"})

    with pytest.raises(MergeError, match="failed to merge PR #42: Pull request is not mergeable"):
        RealGitHubGateway(runner).merge(42, MergeStrategy.MERGE)


def test_unknown_strategy_falls_back_to_merge_flag() -> None:
    assert merge_flag_for("fast-forward") == "--merge"
    assert merge_flag_for(None) == "--merge"
    assert build_merge_args(9, "bogus")[-1] == "--merge"
