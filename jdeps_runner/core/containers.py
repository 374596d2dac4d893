from __future__ import annotations

from pathlib import Path

from jdeps_runner.core.config import settings
from jdeps_runner.core.platform import Platform
from jdeps_runner.jdeps.command_line import CommandLineBuilder
from jdeps_runner.jdeps.executor import ProcessExecutor
from jdeps_runner.jdeps.resolver import ExecutableResolver
from jdeps_runner.services.jdeps_service import JDepsService
from jdeps_runner.toolchains.registry import ToolchainManager, load_toolchains


def build_toolchain_manager() -> ToolchainManager:
    return ToolchainManager(load_toolchains(Path(settings.JDEPS_TOOLCHAINS_FILE)))


def build_jdeps_service(timeout_sec: int | None = None) -> JDepsService:
    """Wire a service from the current settings.

    Platform identity is probed once here; an explicit ``timeout_sec``
    overrides ``JDEPS_TIMEOUT_SEC``.
    """
    platform = Platform.current()
    return JDepsService(
        resolver=ExecutableResolver(platform),
        builder=CommandLineBuilder(platform.path_separator),
        executor=ProcessExecutor(timeout_sec or settings.JDEPS_TIMEOUT_SEC),
        toolchains=build_toolchain_manager(),
        default_executable=settings.JDEPS_EXECUTABLE,
        validate_options=settings.JDEPS_VALIDATE_OPTIONS,
    )
