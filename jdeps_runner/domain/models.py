from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ExecutableLocation:
    """Absolute path of a jdeps binary that existed when it was resolved."""

    path: Path

    def __str__(self) -> str:
        return str(self.path)


@dataclass(frozen=True)
class CommandLine:
    executable: str
    arguments: tuple[str, ...] = ()

    @property
    def argv(self) -> list[str]:
        return [self.executable, *self.arguments]

    def render(self) -> str:
        """Space-joined argv for messages, with every ``'`` removed.

        Not shell-safe: ``"it's"`` renders as ``its`` and arguments with
        spaces are not quoted. Use :attr:`argv` to re-run a command.
        """
        return " ".join(self.argv).replace("'", "")


@dataclass(frozen=True)
class ExecutionOutcome:
    exit_code: int
    stdout: str
    stderr: str

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    @property
    def output(self) -> str | None:
        # blank stdout counts as "no output"
        text = self.stdout.strip()
        return text or None
