"""Console implementation writing styled output with click."""

import sys

import click

from pr_manager.gateway.console.abc import Console, is_affirmative


class ClickConsole(Console):
    """Production console.

    Normal output goes to stdout; errors go to stderr. Prompts read a single
    line from stdin, so end-of-input answers "no" instead of aborting.
    """

    def __init__(self, *, verbose: bool) -> None:
        self._verbose = verbose

    def info(self, message: str) -> None:
        click.echo(click.style("[INFO]", fg="blue") + f"    {message}")

    def success(self, message: str) -> None:
        click.echo(click.style("[SUCCESS]", fg="green") + f" {message}")

    def warning(self, message: str) -> None:
        click.echo(click.style("[WARNING]", fg="yellow") + f" {message}")

    def error(self, message: str) -> None:
        click.echo(click.style("[ERROR]", fg="red") + f"   {message}", err=True)

    def debug(self, message: str) -> None:
        if self._verbose:
            click.echo(click.style("[DEBUG]", fg="cyan") + f"   {message}")

    def header(self, message: str) -> None:
        click.echo()
        click.echo(click.style(f"=== {message} ===", fg="blue", bold=True))
        click.echo()

    def confirm(self, message: str) -> bool:
        click.echo(click.style(message, fg="yellow") + " [y/N]: ", nl=False)
        line = sys.stdin.readline()
        if not line:
            # EOF: finish the prompt line before answering "no"
            click.echo()
            return False
        return is_affirmative(line)
