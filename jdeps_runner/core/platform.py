from __future__ import annotations

import os
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path


def _running_java_home() -> Path | None:
    """Home of the Java runtime on PATH, as ``java.home`` would report it."""
    java = shutil.which("java")
    if java is None:
        return None
    # <home>/bin/java, following alternatives symlinks
    return Path(java).resolve().parent.parent


@dataclass(frozen=True)
class Platform:
    is_windows: bool
    path_separator: str
    java_home: Path | None = None

    @classmethod
    def current(cls) -> "Platform":
        return cls(
            is_windows=sys.platform.startswith("win"),
            path_separator=os.pathsep,
            java_home=_running_java_home(),
        )

    def executable_name(self, tool: str) -> str:
        return tool + ".exe" if self.is_windows else tool
