"""Production command runner using subprocess."""

import logging
import subprocess
from collections.abc import Sequence

from pr_manager.core.errors import ExternalToolError
from pr_manager.gateway.command_runner.abc import CommandRunner

logger = logging.getLogger(__name__)

# Shell conventions for "command not found" and "not executable"
COMMAND_NOT_FOUND_RETURNCODE = 127
COMMAND_NOT_EXECUTABLE_RETURNCODE = 126


class RealCommandRunner(CommandRunner):
    """Production implementation using subprocess.run.

    Blocks until the program exits. No timeout and no retries.
    """

    def run(self, program: str, args: Sequence[str]) -> str:
        cmd = [program, *args]
        logger.debug("Executing: %s", " ".join(cmd))

        try:
            result = subprocess.run(cmd, capture_output=True, text=True, check=False)
        except OSError as e:
            logger.debug("Could not start %s: %s", program, e)
            if isinstance(e, FileNotFoundError):
                message = f"{program}: command not found"
                returncode = COMMAND_NOT_FOUND_RETURNCODE
            else:
                message = f"{program}: cannot execute ({e.strerror or e})"
                returncode = COMMAND_NOT_EXECUTABLE_RETURNCODE
            raise ExternalToolError(
                message,
                program=program,
                args=args,
                returncode=returncode,
            ) from e

        logger.debug("%s exited with %d", program, result.returncode)

        stdout = result.stdout.strip() if result.stdout else ""
        if result.returncode != 0:
            stderr = result.stderr.strip() if result.stderr else ""
            message = stderr if stderr else stdout
            raise ExternalToolError(
                message,
                program=program,
                args=args,
                returncode=result.returncode,
            )

        return stdout
