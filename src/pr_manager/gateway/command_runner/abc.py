"""Abstract interface for running external programs."""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class CommandRunner(ABC):
    """Runs a named program with arguments and returns its output.

    All implementations (real and fake) must implement this interface.
    """

    @abstractmethod
    def run(self, program: str, args: Sequence[str]) -> str:
        """Run program with args and wait for it to finish.

        Args:
            program: Executable name, resolved via PATH (e.g. "gh")
            args: Ordered arguments passed to the program

        Returns:
            Trimmed stdout text

        Raises:
            ExternalToolError: If the program exits non-zero or cannot be
                started. The message is trimmed stderr, falling back to
                trimmed stdout when stderr is empty.
        """
        ...
