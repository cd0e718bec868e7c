"""Options and error boundary shared by the workflow commands."""

from collections.abc import Callable
from typing import Any, TypeVar

import click

from pr_manager.cli.config import build_workflow_options
from pr_manager.core.context import PrManagerContext
from pr_manager.core.errors import PrManagerError
from pr_manager.core.options import MERGE_METHOD_CHOICES
from pr_manager.core.workflow import WorkflowComposer

F = TypeVar("F", bound=Callable[..., Any])


class PRNumberType(click.ParamType):
    """A positive integer PR number."""

    name = "PR_NUMBER"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> int:
        if isinstance(value, int) and not isinstance(value, bool):
            number = value
        else:
            text = str(value).strip()
            if not (text.isascii() and text.isdigit()):
                self.fail(f"invalid PR number {value!r} - must be a positive integer", param, ctx)
            number = int(text)
        if number <= 0:
            self.fail(f"invalid PR number {value!r} - must be a positive integer", param, ctx)
        return number


PR_NUMBER = PRNumberType()


def workflow_options(fn: F) -> F:
    """Attach the PR_NUMBER argument and the flags every workflow command takes."""
    fn = click.option(
        "--merge-method",
        "-m",
        type=click.Choice(MERGE_METHOD_CHOICES),
        default=None,
        help="Merge strategy (default: merge, or [workflow].merge_method from config).",
    )(fn)
    # Legacy alias from the shell script: enables verbose output
    fn = click.option("--quiet", "-q", is_flag=True, hidden=True)(fn)
    fn = click.option(
        "--verbose", "-v", is_flag=True, help="Print extra diagnostic information."
    )(fn)
    fn = click.option(
        "--auto", "-a", is_flag=True, help="Skip all interactive prompts (useful for CI)."
    )(fn)
    fn = click.argument("pr_number", type=PR_NUMBER)(fn)
    return fn


def run_workflow(
    ctx: PrManagerContext,
    entry: Callable[[WorkflowComposer, int], int],
    pr_number: int,
    *,
    auto: bool,
    verbose: bool,
    quiet: bool,
    merge_method: str | None,
) -> None:
    """Build options, run one workflow entry point, and map errors to exit codes.

    Exits 0 on success or a declined prompt, 1 on any PrManagerError.
    """
    verbose = verbose or quiet
    console = ctx.console_for(verbose=verbose)
    try:
        options = build_workflow_options(
            ctx.config, auto=auto, verbose=verbose, merge_method=merge_method
        )
        exit_code = entry(ctx.composer(options, console), pr_number)
    except PrManagerError as e:
        console.error(str(e))
        raise SystemExit(1) from e
    if exit_code != 0:
        raise SystemExit(exit_code)
