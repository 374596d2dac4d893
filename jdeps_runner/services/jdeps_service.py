from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Mapping

from jdeps_runner.domain.errors import JDepsError, NonZeroExit
from jdeps_runner.domain.models import CommandLine, ExecutableLocation
from jdeps_runner.domain.schemas import JDepsConfig
from jdeps_runner.jdeps.command_line import CommandLineBuilder
from jdeps_runner.jdeps.executor import ProcessExecutor, check_outcome
from jdeps_runner.jdeps.resolver import ExecutableResolver
from jdeps_runner.toolchains.registry import ToolchainManager

logger = logging.getLogger(__name__)


@dataclass
class JDepsResult:
    command_line: CommandLine
    exit_code: int
    output: str | None


class JDepsService:
    """
    Orchestrates one invocation: resolve executable → build command line → execute.
    Holds no per-invocation state; safe to share between threads.
    """

    def __init__(
        self,
        resolver: ExecutableResolver,
        builder: CommandLineBuilder,
        executor: ProcessExecutor,
        toolchains: ToolchainManager | None = None,
        default_executable: str | None = None,
        validate_options: bool = False,
    ):
        self.resolver = resolver
        self.builder = builder
        self.executor = executor
        self.toolchains = toolchains or ToolchainManager()
        self.default_executable = default_executable
        self.validate_options = validate_options

    def locate(
        self,
        executable: str | None = None,
        requirements: Mapping[str, str] | None = None,
        invocation_id: str | None = None,
    ) -> ExecutableLocation:
        toolchain = self.toolchains.get_toolchain("jdk", requirements)
        if toolchain is not None:
            logger.info(
                "Toolchain in jdeps runner: %s",
                toolchain,
                extra={"invocation_id": invocation_id},
            )
        return self.resolver.resolve(executable or self.default_executable, toolchain)

    def preview(
        self,
        config: JDepsConfig,
        executable: str | None = None,
        requirements: Mapping[str, str] | None = None,
        validate: bool | None = None,
    ) -> CommandLine:
        """Command line that :meth:`run` would execute, without executing it."""
        self._validate(config, validate)
        return self.builder.build(self.locate(executable, requirements), config)

    def run(
        self,
        config: JDepsConfig,
        executable: str | None = None,
        requirements: Mapping[str, str] | None = None,
        validate: bool | None = None,
    ) -> JDepsResult:
        invocation_id = str(uuid.uuid4())

        self._validate(config, validate)
        cmd = self.builder.build(self.locate(executable, requirements, invocation_id), config)
        extra = {"invocation_id": invocation_id, "command_line": cmd.render()}
        logger.debug("Running jdeps", extra=extra)

        try:
            outcome = self.executor.execute(cmd)
            output = check_outcome(cmd, outcome)
        except NonZeroExit as e:
            logger.error("jdeps failed: %s", e.stderr.strip(), extra={**extra, "exit_code": e.exit_code})
            raise
        except JDepsError as e:
            logger.error("jdeps failed: %s", str(e).strip(), extra=extra)
            raise

        if output:
            logger.info("\n%s", output, extra={**extra, "exit_code": outcome.exit_code})
        return JDepsResult(cmd, outcome.exit_code, output)

    def _validate(self, config: JDepsConfig, validate: bool | None) -> None:
        if self.validate_options if validate is None else validate:
            config.ensure_compatible()
