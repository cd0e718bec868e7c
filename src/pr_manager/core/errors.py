"""Exception hierarchy for pr-manager operations.

Every failure that should end a workflow with a user-facing message derives
from PrManagerError. The CLI boundary catches PrManagerError, prints the
message, and exits non-zero. A declined confirmation is not an error and has
no exception class.
"""

from collections.abc import Sequence


class PrManagerError(Exception):
    """Base class for all workflow failures."""


class ExternalToolError(PrManagerError):
    """An external program exited non-zero or could not be started.

    The message is the program's diagnostic text: trimmed stderr, or trimmed
    stdout when stderr was empty.
    """

    def __init__(self, message: str, *, program: str, args: Sequence[str], returncode: int) -> None:
        super().__init__(message)
        self.program = program
        self.args_list = list(args)
        self.returncode = returncode

    @property
    def command_display(self) -> str:
        return " ".join([self.program, *self.args_list])


class InvalidOptionError(PrManagerError):
    """A workflow option (e.g. merge method) has an unsupported value."""


# --- Environment ---


class EnvironmentValidationError(PrManagerError):
    """The local environment cannot run the workflow."""


class ToolNotInstalledError(EnvironmentValidationError):
    pass


class NotARepositoryError(EnvironmentValidationError):
    pass


class NotAuthenticatedError(EnvironmentValidationError):
    pass


# --- PR state ---


class PRNotFoundError(PrManagerError):
    """The PR does not exist or is not accessible."""


class PRDecodeError(PrManagerError):
    """The gh payload could not be mapped to a PullRequestRecord."""


class StateGuardError(PrManagerError):
    """The PR is in a state that forbids the requested mutation."""


class NotOpenError(StateGuardError):
    pass


class ConflictError(StateGuardError):
    pass


# --- Mutations ---


class ApprovalError(PrManagerError):
    pass


class MergeError(PrManagerError):
    pass
