"""Approve then merge a pull request."""

import click

from pr_manager.cli.commands.shared import run_workflow, workflow_options
from pr_manager.core.context import PrManagerContext
from pr_manager.core.workflow import WorkflowComposer


@click.command("full")
@workflow_options
@click.pass_obj
def full_cmd(
    ctx: PrManagerContext,
    pr_number: int,
    auto: bool,
    verbose: bool,
    quiet: bool,
    merge_method: str | None,
) -> None:
    """Review and merge a pull request (default workflow).

    \b
    1. Approve the PR (skipped if already approved).
    2. Ask for confirmation (unless --auto).
    3. Merge using the selected merge method.

    \b
    Examples:
      pr-manager full 42
      pr-manager 42 --auto --merge-method squash
    """
    run_workflow(
        ctx,
        WorkflowComposer.full,
        pr_number,
        auto=auto,
        verbose=verbose,
        quiet=quiet,
        merge_method=merge_method,
    )
