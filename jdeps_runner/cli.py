"""Build-step entry point: ``jdeps-run [options] OUTPUT_DIRECTORY``.

Exit status: 0 on success, 1 when jdeps reports failure, 2 when the
options or the environment are unusable.
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import Any, Sequence

from pydantic import ValidationError

from jdeps_runner.core.containers import build_jdeps_service
from jdeps_runner.core.logging import setup_logging
from jdeps_runner.domain.errors import (
    ConflictingOptions,
    ExecutableNotFound,
    InvalidEnvironment,
    NonZeroExit,
    ProcessExecutionError,
)
from jdeps_runner.domain.schemas import JDepsConfig

EXIT_OK = 0
EXIT_TOOL_FAILED = 1
EXIT_USAGE = 2


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="jdeps-run", description="Run jdeps over compiled classes.")
    ap.add_argument("output_directory", help="Directory of compiled classes to analyse")

    ap.add_argument("--summary", action="store_true", default=None)
    ap.add_argument("--jdk-internals", dest="jdk_internals", action="store_true", default=None)
    ap.add_argument("--api-only", dest="api_only", action="store_true", default=None)
    ap.add_argument("--verbose", action="store_true", default=None)
    ap.add_argument("--verbose-level", dest="verbose_level", metavar="LEVEL", help="package or class")
    ap.add_argument("--package", dest="packages", action="append", default=[])
    ap.add_argument("--regex")
    ap.add_argument("--include")
    ap.add_argument("--profile", action="store_true", default=None)
    ap.add_argument("--recursive", action="store_true", default=None)
    ap.add_argument("--version", action="store_true", default=None, help="Print jdeps version information")
    ap.add_argument("--dot-output", dest="dot_output_directory")
    ap.add_argument("--classpath", action="append", default=[], help="Repeatable; may hold several entries")
    ap.add_argument("-D", dest="properties", action="append", default=[], metavar="KEY=VALUE")

    ap.add_argument("--executable", help="jdeps binary or the directory holding it")
    ap.add_argument("--jdk-version", dest="jdk_version", help="Select a registered JDK toolchain")
    ap.add_argument("--check-options", action="store_true", help="Reject mutually exclusive options")
    ap.add_argument("--timeout", type=int, help="Kill jdeps after this many seconds")
    ap.add_argument("--dry-run", action="store_true", help="Print the command line instead of running it")
    return ap


def parse_properties(items: Sequence[str]) -> dict[str, str]:
    props: dict[str, str] = {}
    for item in items:
        key, _, value = item.partition("=")
        props[key.strip()] = value
    return props


def config_from_args(args: argparse.Namespace) -> JDepsConfig:
    explicit: dict[str, Any] = {
        "output_directory": args.output_directory,
        "packages": args.packages,
        "classpath": [e for entry in args.classpath for e in entry.split(os.pathsep) if e],
    }
    for name in (
        "summary",
        "jdk_internals",
        "api_only",
        "verbose",
        "verbose_level",
        "regex",
        "include",
        "profile",
        "recursive",
        "version",
        "dot_output_directory",
    ):
        value = getattr(args, name)
        if value is not None:
            explicit[name] = value
    return JDepsConfig.from_properties(parse_properties(args.properties), **explicit)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(sys.stderr)

    try:
        config = config_from_args(args)
        service = build_jdeps_service(timeout_sec=args.timeout)
    except (ValidationError, ValueError) as e:
        print(f"[jdeps] invalid options: {e}", file=sys.stderr)
        return EXIT_USAGE

    requirements = {"version": args.jdk_version} if args.jdk_version else None
    validate = True if args.check_options else None

    try:
        if args.dry_run:
            print(service.preview(config, args.executable, requirements, validate).render())
            return EXIT_OK
        result = service.run(config, args.executable, requirements, validate)
    except ConflictingOptions as e:
        print(f"[jdeps] {e}", file=sys.stderr)
        return EXIT_USAGE
    except (ExecutableNotFound, InvalidEnvironment) as e:
        print(f"[jdeps] Unable to find jdeps command: {e}", file=sys.stderr)
        return EXIT_USAGE
    except ProcessExecutionError as e:
        print(f"[jdeps] Unable to execute jdeps command: {e}", file=sys.stderr)
        return EXIT_USAGE
    except NonZeroExit as e:
        print(f"[jdeps] FAILED{e}", file=sys.stderr, end="")
        return EXIT_TOOL_FAILED

    if result.output:
        print(result.output)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
