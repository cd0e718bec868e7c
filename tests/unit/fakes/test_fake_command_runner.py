"""Unit tests for FakeCommandRunner."""

import pytest

from pr_manager.core.errors import ExternalToolError
from pr_manager.gateway.command_runner.fake import FakeCommandRunner, RunCall


def test_unscripted_command_succeeds_with_empty_output() -> None:
    runner = FakeCommandRunner()

    assert runner.run("gh", ["version"]) == ""


def test_scripted_response_is_trimmed() -> None:
    runner = FakeCommandRunner(responses={("gh", "version"): "gh version 2.40.0\n"})

    assert runner.run("gh", ["version"]) == "gh version 2.40.0"


def test_scripted_failure_raises() -> None:
    runner = FakeCommandRunner(failures={("gh", "auth", "status"): "not logged in\n"})

    with pytest.raises(ExternalToolError) as exc_info:
        runner.run("gh", ["auth", "status"])

    assert str(exc_info.value) == "not logged in"
    assert exc_info.value.returncode == 1


def test_calls_are_recorded_including_failures() -> None:
    runner = FakeCommandRunner(failures={("git", "status"): "fatal"})

    runner.run("gh", ["version"])
    with pytest.raises(ExternalToolError):
        runner.run("git", ["status"])

    assert runner.calls == [
        RunCall(program="gh", args=("version",)),
        RunCall(program="git", args=("status",)),
    ]
    assert runner.commands == [("gh", "version"), ("git", "status")]
