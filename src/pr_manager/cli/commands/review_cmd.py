"""Approve a pull request."""

import click

from pr_manager.cli.commands.shared import run_workflow, workflow_options
from pr_manager.core.context import PrManagerContext
from pr_manager.core.workflow import WorkflowComposer


@click.command("review")
@workflow_options
@click.pass_obj
def review_cmd(
    ctx: PrManagerContext,
    pr_number: int,
    auto: bool,
    verbose: bool,
    quiet: bool,
    merge_method: str | None,
) -> None:
    """Review (approve) a pull request.

    Skips approval if the PR already has an approving review, so running it
    twice never submits a duplicate.

    \b
    Examples:
      pr-manager review 42
      pr-manager review 42 --auto
    """
    run_workflow(
        ctx,
        WorkflowComposer.review,
        pr_number,
        auto=auto,
        verbose=verbose,
        quiet=quiet,
        merge_method=merge_method,
    )
