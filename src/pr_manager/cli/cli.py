import logging

import click

from pr_manager.cli.commands.full_cmd import full_cmd
from pr_manager.cli.commands.merge_cmd import merge_cmd
from pr_manager.cli.commands.review_cmd import review_cmd
from pr_manager.core.context import create_context
from pr_manager.core.errors import PrManagerError

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

# Command used when the first argument is a bare PR number
DEFAULT_COMMAND = "full"

# Options consumed by the group itself, before any command name
GROUP_FLAGS = frozenset({"--debug"})


class PrManagerGroup(click.Group):
    """Group that accepts `pr-manager <PR_NUMBER>` as shorthand for `full`."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        idx = 0
        while idx < len(args) and args[idx] in GROUP_FLAGS:
            idx += 1

        if idx < len(args):
            first = args[idx]
            is_group_request = first in ctx.help_option_names or first == "--version"
            if first not in self.commands and not is_group_request:
                args = [*args[:idx], DEFAULT_COMMAND, *args[idx:]]

        return super().parse_args(ctx, args)


@click.group(cls=PrManagerGroup, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="pr-manager")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Automate GitHub PR review and merge workflows.

    Running `pr-manager <PR_NUMBER>` is the same as `pr-manager full <PR_NUMBER>`.
    """
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except PrManagerError as e:
            click.echo(click.style("[ERROR]", fg="red") + f"   {e}", err=True)
            raise SystemExit(1) from e


cli.add_command(review_cmd)
cli.add_command(merge_cmd)
cli.add_command(full_cmd)
