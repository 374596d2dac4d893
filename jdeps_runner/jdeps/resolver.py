from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping

from jdeps_runner.core.platform import Platform
from jdeps_runner.domain.errors import ExecutableNotFound, InvalidEnvironment
from jdeps_runner.domain.models import ExecutableLocation
from jdeps_runner.toolchains.base import Toolchain

logger = logging.getLogger(__name__)

TOOL_NAME = "jdeps"


class ExecutableResolver:
    """
    Finds the jdeps binary. Sources, most specific first:
    toolchain, explicit path, the running Java home, JAVA_HOME.
    """

    def __init__(
        self,
        platform: Platform | None = None,
        environ: Mapping[str, str] | None = None,
        tool: str = TOOL_NAME,
    ):
        self.platform = platform or Platform.current()
        self.environ = os.environ if environ is None else environ
        self.tool = tool

    @property
    def executable_name(self) -> str:
        return self.platform.executable_name(self.tool)

    def resolve(self, user_path: str | None = None, toolchain: Toolchain | None = None) -> ExecutableLocation:
        if toolchain is not None:
            found = toolchain.find_tool(self.tool)
            if found:
                user_path = found

        if user_path:
            return self._from_explicit(Path(user_path))
        return self._from_java_home()

    def _from_explicit(self, exe: Path) -> ExecutableLocation:
        if exe.is_dir():
            exe = exe / self.executable_name

        if self.platform.is_windows and "." not in exe.name:
            exe = exe.with_name(exe.name + ".exe")

        if not exe.is_file():
            raise ExecutableNotFound(str(exe))
        return self._located(exe)

    def _from_java_home(self) -> ExecutableLocation:
        exe: Path | None = None

        # java.home is usually the JRE inside the JDK, so look one level up
        if self.platform.java_home is not None:
            exe = self.platform.java_home.parent / "bin" / self.executable_name

        if exe is None or not exe.is_file():
            java_home = self.environ.get("JAVA_HOME", "")
            if not java_home:
                raise InvalidEnvironment("JAVA_HOME")
            exe = Path(java_home) / "bin" / self.executable_name

        if not exe.is_file():
            raise ExecutableNotFound(
                str(exe),
                f"The jdeps executable '{exe}' doesn't exist or is not a file. "
                "Verify the JAVA_HOME environment variable.",
            )
        return self._located(exe)

    @staticmethod
    def _located(exe: Path) -> ExecutableLocation:
        location = ExecutableLocation(exe.absolute())
        logger.debug("Resolved jdeps executable", extra={"executable": str(location)})
        return location
