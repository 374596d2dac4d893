from __future__ import annotations

from jdeps_runner.domain.models import CommandLine, ExecutionOutcome


class JDepsError(RuntimeError):
    """Base class for every failure surfaced by a jdeps invocation."""


class ExecutableNotFound(JDepsError):
    def __init__(self, path: str, message: str | None = None):
        self.path = path
        super().__init__(message or f"The jdeps executable '{path}' doesn't exist or is not a file.")


class InvalidEnvironment(JDepsError):
    def __init__(self, variable: str, message: str | None = None):
        self.variable = variable
        super().__init__(message or f"The environment variable {variable} is not correctly set.")


class ProcessExecutionError(JDepsError):
    """The process could not be run to completion; no outcome exists."""


class ProcessSpawnError(ProcessExecutionError):
    pass


class ProcessTimeout(ProcessExecutionError):
    pass


class NonZeroExit(JDepsError):
    """jdeps ran and reported failure through its exit code."""

    def __init__(self, command_line: CommandLine, outcome: ExecutionOutcome):
        self.command_line = command_line
        self.outcome = outcome
        super().__init__(self._message())

    @property
    def exit_code(self) -> int:
        return self.outcome.exit_code

    @property
    def stderr(self) -> str:
        return self.outcome.stderr

    @property
    def rendered_command_line(self) -> str:
        return self.command_line.render()

    def _message(self) -> str:
        msg = f"\nExit code: {self.exit_code}"
        if self.stderr:
            msg += f" - {self.stderr}"
        msg += f"\nCommand line was: {self.rendered_command_line}\n\n"
        return msg


class ConflictingOptions(JDepsError, ValueError):
    def __init__(self, conflicts: list[str]):
        self.conflicts = list(conflicts)
        super().__init__("Conflicting jdeps options: " + "; ".join(self.conflicts))
