"""Terminal output and prompt abstraction.

Workflows never echo directly; they talk to a Console so tests can substitute
a recording implementation.
"""

from abc import ABC, abstractmethod

AFFIRMATIVE_ANSWERS = frozenset({"y", "yes"})


def is_affirmative(answer: str | None) -> bool:
    """Return True only for "y" or "yes", case-insensitive.

    None (end of input), empty input and anything else count as "no".
    """
    if answer is None:
        return False
    return answer.strip().lower() in AFFIRMATIVE_ANSWERS


class Console(ABC):
    """Leveled user-facing messages plus a yes/no prompt."""

    @abstractmethod
    def info(self, message: str) -> None: ...

    @abstractmethod
    def success(self, message: str) -> None: ...

    @abstractmethod
    def warning(self, message: str) -> None: ...

    @abstractmethod
    def error(self, message: str) -> None: ...

    @abstractmethod
    def debug(self, message: str) -> None:
        """Emit a diagnostic line. Only shown in verbose mode."""
        ...

    @abstractmethod
    def header(self, message: str) -> None: ...

    @abstractmethod
    def confirm(self, message: str) -> bool:
        """Show a [y/N] prompt and read one line.

        Returns:
            True if the answer is "y" or "yes" (case-insensitive), False otherwise
        """
        ...
