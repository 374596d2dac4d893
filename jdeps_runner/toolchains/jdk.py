from __future__ import annotations

from pathlib import Path
from typing import Mapping

from jdeps_runner.core.platform import Platform

from .base import Toolchain


def _version_matches(wanted: str, actual: str) -> bool:
    # "11" matches "11.0.2" but not "110"
    return actual == wanted or actual.startswith(wanted + ".")


class JdkToolchain(Toolchain):
    def __init__(
        self,
        home: str | Path,
        version: str | None = None,
        vendor: str | None = None,
        platform: Platform | None = None,
    ):
        self.home = Path(home)
        self.version = version
        self.vendor = vendor
        self._platform = platform or Platform.current()

    @property
    def type(self) -> str:
        return "jdk"

    def find_tool(self, tool_name: str) -> str | None:
        candidate = self.home / "bin" / self._platform.executable_name(tool_name)
        if candidate.is_file():
            return str(candidate)
        return None

    def matches(self, requirements: Mapping[str, str]) -> bool:
        for key, wanted in requirements.items():
            if key == "version":
                if self.version is None or not _version_matches(wanted, self.version):
                    return False
            elif key == "vendor":
                if (self.vendor or "").lower() != wanted.lower():
                    return False
            else:
                return False
        return True

    def __repr__(self) -> str:
        return f"JDK[{self.home}]" + (f" version={self.version}" if self.version else "")
