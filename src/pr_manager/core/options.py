"""Workflow options and merge strategy definitions."""

from dataclasses import dataclass
from enum import Enum

from pr_manager.core.errors import InvalidOptionError


class MergeStrategy(Enum):
    """Commit-history shape used when merging a PR.

    The value is the display string accepted on the command line and shown
    in log output.
    """

    MERGE = "merge"
    SQUASH = "squash"
    REBASE = "rebase"
    AUTO = "auto"

    @property
    def display(self) -> str:
        return self.value

    @property
    def flag(self) -> str:
        """The `gh pr merge` flag selecting this strategy."""
        return f"--{self.value}"

    @classmethod
    def from_value(cls, value: str) -> "MergeStrategy":
        """Parse a user-supplied merge method.

        Raises:
            InvalidOptionError: If value is not one of merge, squash, rebase, auto
        """
        for strategy in cls:
            if strategy.value == value:
                return strategy
        choices = ", ".join(MERGE_METHOD_CHOICES)
        raise InvalidOptionError(f"unknown merge method {value!r} - choose one of: {choices}")

    @classmethod
    def from_flag(cls, flag: str) -> "MergeStrategy":
        for strategy in cls:
            if strategy.flag == flag:
                return strategy
        raise InvalidOptionError(f"unknown merge flag {flag!r}")


MERGE_METHOD_CHOICES: tuple[str, ...] = tuple(strategy.value for strategy in MergeStrategy)

DEFAULT_MERGE_STRATEGY = MergeStrategy.MERGE


@dataclass(frozen=True)
class WorkflowOptions:
    """Caller-supplied configuration for one invocation.

    Built once from command-line input and config, then shared read-only by
    every orchestrator.
    """

    auto: bool
    verbose: bool
    merge_strategy: MergeStrategy = DEFAULT_MERGE_STRATEGY
