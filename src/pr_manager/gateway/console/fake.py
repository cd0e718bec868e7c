"""Fake Console implementation for testing."""

from dataclasses import dataclass

from pr_manager.gateway.console.abc import Console, is_affirmative


@dataclass(frozen=True)
class ConsoleMessage:
    level: str  # "info", "success", "warning", "error", "debug", "header"
    text: str


class FakeConsole(Console):
    """In-memory console that records output and answers prompts from a script.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, answers: list[str] | None = None) -> None:
        """Create FakeConsole with scripted prompt answers.

        Args:
            answers: Raw lines returned to successive confirm() calls, in order.
                When exhausted, confirm() behaves as end-of-input and answers "no".
        """
        self._answers = list(answers) if answers is not None else []
        self._messages: list[ConsoleMessage] = []
        self._prompts: list[str] = []

    def _record(self, level: str, message: str) -> None:
        self._messages.append(ConsoleMessage(level=level, text=message))

    def info(self, message: str) -> None:
        self._record("info", message)

    def success(self, message: str) -> None:
        self._record("success", message)

    def warning(self, message: str) -> None:
        self._record("warning", message)

    def error(self, message: str) -> None:
        self._record("error", message)

    def debug(self, message: str) -> None:
        self._record("debug", message)

    def header(self, message: str) -> None:
        self._record("header", message)

    def confirm(self, message: str) -> bool:
        self._prompts.append(message)
        if not self._answers:
            return False
        return is_affirmative(self._answers.pop(0))

    @property
    def messages(self) -> list[ConsoleMessage]:
        return list(self._messages)

    @property
    def prompts(self) -> list[str]:
        """Messages passed to confirm(), in call order."""
        return list(self._prompts)

    def texts(self, level: str) -> list[str]:
        return [m.text for m in self._messages if m.level == level]
