"""pr-manager CLI entry point.

This package provides a Click-based CLI that approves and merges GitHub pull
requests by driving the `gh` CLI. See `pr-manager --help` for details.
"""

from pr_manager.cli.cli import cli


def main() -> None:
    """CLI entry point used by the `pr-manager` console script."""
    cli()
