"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from pr_manager.cli.config import LoadedConfig, load_config
from pr_manager.core.environment import EnvironmentValidator
from pr_manager.core.options import WorkflowOptions
from pr_manager.core.workflow import WorkflowComposer
from pr_manager.gateway.command_runner.abc import CommandRunner
from pr_manager.gateway.command_runner.real import RealCommandRunner
from pr_manager.gateway.console.abc import Console
from pr_manager.gateway.console.real import ClickConsole
from pr_manager.gateway.github.abc import GitHubGateway
from pr_manager.gateway.github.real import RealGitHubGateway

CONFIG_DIR_NAME = ".pr-manager"


@dataclass(frozen=True)
class PrManagerContext:
    """Immutable context holding all dependencies for pr-manager operations.

    Created at the CLI entry point and threaded through the commands.
    Frozen to prevent accidental modification at runtime.

    Note: console may be None in the production context; commands then build
    a ClickConsole once the verbose flag is known.
    """

    command_runner: CommandRunner
    github: GitHubGateway
    console: Console | None
    cwd: Path
    config: LoadedConfig

    def console_for(self, *, verbose: bool) -> Console:
        if self.console is not None:
            return self.console
        return ClickConsole(verbose=verbose)

    def composer(self, options: WorkflowOptions, console: Console) -> WorkflowComposer:
        return WorkflowComposer(
            validator=EnvironmentValidator(self.command_runner),
            github=self.github,
            console=console,
            options=options,
        )

    @staticmethod
    def for_test(
        *,
        command_runner: CommandRunner | None = None,
        github: GitHubGateway | None = None,
        console: Console | None = None,
        cwd: Path | None = None,
        config: LoadedConfig | None = None,
    ) -> "PrManagerContext":
        """Create a context wired with fakes.

        Every dependency not supplied defaults to its fake: a FakeCommandRunner
        whose commands all succeed, an empty FakeGitHubGateway, and a
        FakeConsole that answers "no" to every prompt.

        Example:
            >>> github = FakeGitHubGateway(pull_requests={42: pr})
            >>> ctx = PrManagerContext.for_test(github=github)
            >>> result = runner.invoke(cli, ["full", "42", "--auto"], obj=ctx)
            >>> assert github.merged_prs == [(42, MergeStrategy.MERGE)]
        """
        from pr_manager.gateway.command_runner.fake import FakeCommandRunner
        from pr_manager.gateway.console.fake import FakeConsole
        from pr_manager.gateway.github.fake import FakeGitHubGateway

        return PrManagerContext(
            command_runner=command_runner or FakeCommandRunner(),
            github=github or FakeGitHubGateway(),
            console=console or FakeConsole(),
            cwd=cwd or Path("/test/repo"),
            config=config or LoadedConfig(merge_method=None, auto=False),
        )


def create_context() -> PrManagerContext:
    """Create the production context.

    Loads `.pr-manager/config.toml` from the current directory when present.
    """
    cwd = Path.cwd()
    runner = RealCommandRunner()
    return PrManagerContext(
        command_runner=runner,
        github=RealGitHubGateway(runner),
        console=None,
        cwd=cwd,
        config=load_config(cwd / CONFIG_DIR_NAME),
    )
