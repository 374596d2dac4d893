from __future__ import annotations

import logging
import subprocess

from jdeps_runner.core.util import run_cmd
from jdeps_runner.domain.errors import NonZeroExit, ProcessSpawnError, ProcessTimeout
from jdeps_runner.domain.models import CommandLine, ExecutionOutcome

logger = logging.getLogger(__name__)


class ProcessExecutor:
    def __init__(self, timeout_sec: int | None = None):
        self.timeout_sec = timeout_sec

    def execute(self, cmd: CommandLine) -> ExecutionOutcome:
        """Run ``cmd`` without a shell and wait for both output streams and the exit code."""
        logger.debug("Executing: %s", cmd.render())
        try:
            r = run_cmd(cmd.argv, timeout_sec=self.timeout_sec)
        except subprocess.TimeoutExpired as e:
            raise ProcessTimeout(
                f"jdeps did not finish within {self.timeout_sec}s; command line was: {cmd.render()}"
            ) from e
        # ValueError: the OS cannot take the argv, e.g. an embedded NUL byte
        except (OSError, ValueError) as e:
            raise ProcessSpawnError(str(e)) from e
        return ExecutionOutcome(r.exit_code, r.stdout, r.stderr)


def check_outcome(cmd: CommandLine, outcome: ExecutionOutcome) -> str | None:
    """Return trimmed stdout of a successful run, raise :class:`NonZeroExit` otherwise."""
    if not outcome.succeeded:
        raise NonZeroExit(cmd, outcome)
    return outcome.output
