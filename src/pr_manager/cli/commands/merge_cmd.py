"""Merge a pull request."""

import click

from pr_manager.cli.commands.shared import run_workflow, workflow_options
from pr_manager.core.context import PrManagerContext
from pr_manager.core.workflow import WorkflowComposer


@click.command("merge")
@workflow_options
@click.pass_obj
def merge_cmd(
    ctx: PrManagerContext,
    pr_number: int,
    auto: bool,
    verbose: bool,
    quiet: bool,
    merge_method: str | None,
) -> None:
    """Merge a pull request.

    The PR must be OPEN and must not have merge conflicts. The source branch
    is kept.

    \b
    Examples:
      pr-manager merge 42
      pr-manager merge 42 --auto --merge-method squash
    """
    run_workflow(
        ctx,
        WorkflowComposer.merge,
        pr_number,
        auto=auto,
        verbose=verbose,
        quiet=quiet,
        merge_method=merge_method,
    )
