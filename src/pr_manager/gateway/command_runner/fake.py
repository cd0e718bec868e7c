"""Fake command runner for testing."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from pr_manager.core.errors import ExternalToolError
from pr_manager.gateway.command_runner.abc import CommandRunner


@dataclass(frozen=True)
class RunCall:
    program: str
    args: tuple[str, ...]

    @property
    def command(self) -> tuple[str, ...]:
        return (self.program, *self.args)


class FakeCommandRunner(CommandRunner):
    """In-memory fake that returns scripted responses.

    This class has NO public setup methods. All state is provided via constructor.
    Commands are keyed by the full tuple (program, *args). A command with no
    scripted response or failure succeeds with empty output.
    """

    def __init__(
        self,
        *,
        responses: Mapping[tuple[str, ...], str] | None = None,
        failures: Mapping[tuple[str, ...], str] | None = None,
    ) -> None:
        """Create FakeCommandRunner with scripted outcomes.

        Args:
            responses: Mapping of command tuple to stdout text
            failures: Mapping of command tuple to error text; these commands
                raise ExternalToolError with returncode 1
        """
        self._responses = dict(responses) if responses is not None else {}
        self._failures = dict(failures) if failures is not None else {}
        self._calls: list[RunCall] = []

    def run(self, program: str, args: Sequence[str]) -> str:
        call = RunCall(program=program, args=tuple(args))
        self._calls.append(call)

        if call.command in self._failures:
            raise ExternalToolError(
                self._failures[call.command].strip(),
                program=program,
                args=args,
                returncode=1,
            )

        return self._responses.get(call.command, "").strip()

    @property
    def calls(self) -> list[RunCall]:
        return list(self._calls)

    @property
    def commands(self) -> list[tuple[str, ...]]:
        return [call.command for call in self._calls]
