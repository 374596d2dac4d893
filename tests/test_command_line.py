"""Tests for jdeps argument assembly."""

from pathlib import Path

from jdeps_runner.domain.models import ExecutableLocation
from jdeps_runner.domain.schemas import JDepsConfig
from jdeps_runner.jdeps.command_line import CommandLineBuilder


def args_for(**fields):
    return CommandLineBuilder(":").arguments(JDepsConfig(**fields))


def test_summary_only():
    assert args_for(summary=True, output_directory="/out") == ["-summary", "/out"]


def test_packages_one_flag_per_entry_in_order():
    assert args_for(packages=["com.a", "com.b"], output_directory="/out") == [
        "-package",
        "com.a",
        "-package",
        "com.b",
        "/out",
    ]


def test_empty_classpath_is_omitted():
    assert "-classpath" not in args_for(classpath=[], output_directory="/out")


def test_classpath_joined_with_separator():
    args = CommandLineBuilder(";").arguments(
        JDepsConfig(classpath=["C:\\m2\\a.jar", "C:\\m2\\b.jar"], output_directory="C:\\out")
    )
    assert args == ["-classpath", "C:\\m2\\a.jar;C:\\m2\\b.jar", "C:\\out"]


def test_only_target_directory_by_default():
    assert args_for(output_directory="/out") == ["/out"]


def test_full_order():
    args = args_for(
        api_only=True,
        classpath=["/lib/a.jar", "/lib/b.jar"],
        dot_output_directory="/dot",
        include="com\\.x\\..*",
        jdk_internals=True,
        packages=["p1"],
        profile=True,
        regex="org\\..*",
        recursive=True,
        summary=True,
        verbose=True,
        verbose_level="class",
        version=True,
        output_directory="/out",
    )
    assert args == [
        "-apionly",
        "-classpath", "/lib/a.jar:/lib/b.jar",
        "-dotoutput", "/dot",
        "-regex", "com\\.x\\..*",
        "-jdkinternals",
        "-package", "p1",
        "-profile",
        "-regex", "org\\..*",
        "-recursive",
        "-summary",
        "-verbose",
        "-verbose:class",
        "-version",
        "/out",
    ]


def test_include_uses_regex_flag():
    assert args_for(include="Foo.*", output_directory="/out") == ["-regex", "Foo.*", "/out"]


def test_verbose_level_is_single_token():
    assert args_for(verbose_level="package", output_directory="/out") == ["-verbose:package", "/out"]


def test_paths_with_spaces_stay_whole():
    args = args_for(dot_output_directory="/my reports/dot", output_directory="/my classes")
    assert args == ["-dotoutput", "/my reports/dot", "/my classes"]


def test_conflicting_options_are_passed_through():
    args = args_for(packages=["a"], regex="b.*", summary=True, output_directory="/out")
    assert args == ["-package", "a", "-regex", "b.*", "-summary", "/out"]


def test_build_is_deterministic():
    cfg = JDepsConfig(packages=["a", "b"], classpath=["x.jar"], verbose=True, output_directory="/out")
    builder = CommandLineBuilder(":")
    exe = ExecutableLocation(Path("/jdk/bin/jdeps"))
    assert builder.build(exe, cfg) == builder.build(exe, cfg)
    assert builder.build(exe, cfg).argv == builder.build(exe, cfg).argv


def test_executable_comes_first():
    cmd = CommandLineBuilder(":").build(ExecutableLocation(Path("/jdk/bin/jdeps")), JDepsConfig(output_directory="/out"))
    assert cmd.argv == ["/jdk/bin/jdeps", "/out"]


def test_render_strips_quotes():
    cmd = CommandLineBuilder(":").build("/jdk/bin/jdeps", JDepsConfig(output_directory="/my classes"))
    assert cmd.render() == "/jdk/bin/jdeps /my classes"


def test_render_drops_apostrophes():
    cmd = CommandLineBuilder(":").build("/jdk/bin/jdeps", JDepsConfig(regex="it's", output_directory="/out"))
    assert cmd.render() == "/jdk/bin/jdeps -regex its /out"
    assert cmd.argv[2] == "it's"
