from __future__ import annotations

import os

from jdeps_runner.domain.models import CommandLine, ExecutableLocation
from jdeps_runner.domain.schemas import JDepsConfig


class CommandLineBuilder:
    """Turns a :class:`JDepsConfig` into jdeps arguments.

    Argument order is fixed so command lines can be compared and
    reproduced by hand. Path values are always single tokens.
    """

    def __init__(self, path_separator: str = os.pathsep):
        self.path_separator = path_separator

    def build(self, executable: ExecutableLocation | str, config: JDepsConfig) -> CommandLine:
        return CommandLine(str(executable), tuple(self.arguments(config)))

    def arguments(self, config: JDepsConfig) -> list[str]:
        args: list[str] = []

        self._flag(args, config.api_only, "-apionly")
        self._classpath(args, config)
        self._value(args, "-dotoutput", config.dot_output_directory)
        # jdeps has a single filter flag; include maps onto it as well
        self._value(args, "-regex", config.include)
        self._flag(args, config.jdk_internals, "-jdkinternals")
        for name in config.packages:
            args += ["-package", name]
        self._flag(args, config.profile, "-profile")
        self._value(args, "-regex", config.regex)
        self._flag(args, config.recursive, "-recursive")
        self._flag(args, config.summary, "-summary")
        self._flag(args, config.verbose, "-verbose")
        if config.verbose_level is not None:
            args.append("-verbose:" + config.verbose_level)
        self._flag(args, config.version, "-version")

        args.append(config.output_directory)
        return args

    def _classpath(self, args: list[str], config: JDepsConfig) -> None:
        entries = [e for e in config.classpath if e]
        # jdeps rejects an empty -classpath
        if entries:
            args += ["-classpath", self.path_separator.join(entries)]

    @staticmethod
    def _flag(args: list[str], enabled: bool, name: str) -> None:
        if enabled:
            args.append(name)

    @staticmethod
    def _value(args: list[str], name: str, value: str | None) -> None:
        if value is not None:
            args += [name, value]
