"""Pre-flight checks run before any PR operation."""

from pr_manager.core.errors import (
    ExternalToolError,
    NotARepositoryError,
    NotAuthenticatedError,
    ToolNotInstalledError,
)
from pr_manager.gateway.command_runner.abc import CommandRunner


class EnvironmentValidator:
    """Checks that gh is installed, cwd is a git checkout, and gh is logged in.

    Each check is a single command. Nothing is cached; every workflow
    re-runs all three.
    """

    def __init__(self, runner: CommandRunner) -> None:
        self._runner = runner

    def check_tool_installed(self) -> None:
        try:
            self._runner.run("gh", ["version"])
        except ExternalToolError as e:
            raise ToolNotInstalledError(
                "GitHub CLI (gh) is not installed or not in PATH\n"
                "Install from: https://cli.github.com/"
            ) from e

    def check_repository(self) -> None:
        try:
            self._runner.run("git", ["rev-parse", "--git-dir"])
        except ExternalToolError as e:
            raise NotARepositoryError(
                "not inside a git repository - please run from your project root"
            ) from e

    def check_authenticated(self) -> None:
        try:
            self._runner.run("gh", ["auth", "status"])
        except ExternalToolError as e:
            raise NotAuthenticatedError(
                "not authenticated with GitHub CLI\nRun: gh auth login"
            ) from e

    def validate(self) -> None:
        """Run all checks in fixed order, stopping at the first failure."""
        self.check_tool_installed()
        self.check_repository()
        self.check_authenticated()
