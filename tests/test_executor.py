"""Tests for running jdeps as a child process."""

import sys
import textwrap

import pytest

from jdeps_runner.domain.errors import NonZeroExit, ProcessExecutionError, ProcessSpawnError, ProcessTimeout
from jdeps_runner.domain.models import CommandLine, ExecutionOutcome
from jdeps_runner.jdeps.executor import ProcessExecutor, check_outcome


def python_cmd(script: str, *args: str) -> CommandLine:
    return CommandLine(sys.executable, ("-c", textwrap.dedent(script), *args))


def test_captures_stdout_and_exit_code():
    outcome = ProcessExecutor().execute(python_cmd("print('hello')"))
    assert outcome.exit_code == 0
    assert outcome.stdout.strip() == "hello"
    assert outcome.stderr == ""


def test_arguments_are_not_shell_interpreted():
    cmd = python_cmd("import sys; print(sys.argv[1:])", "a b", "$HOME", "; rm -rf x")
    outcome = ProcessExecutor().execute(cmd)
    assert outcome.stdout.strip() == str(["a b", "$HOME", "; rm -rf x"])


def test_large_output_on_both_streams_does_not_hang():
    script = """
        import sys
        chunk = "x" * 1024
        for _ in range(256):
            sys.stderr.write(chunk)
            sys.stdout.write(chunk)
        sys.stderr.flush()
        sys.stdout.flush()
    """
    outcome = ProcessExecutor(timeout_sec=60).execute(python_cmd(script))
    assert outcome.exit_code == 0
    assert len(outcome.stderr) == 256 * 1024
    assert len(outcome.stdout) == 256 * 1024


def test_non_zero_exit_carries_diagnostics():
    cmd = python_cmd("import sys; sys.stderr.write('boom'); sys.exit(3)")
    outcome = ProcessExecutor().execute(cmd)
    assert outcome.exit_code == 3

    with pytest.raises(NonZeroExit) as ei:
        check_outcome(cmd, outcome)

    msg = str(ei.value)
    assert "3" in msg
    assert "boom" in msg
    assert cmd.render() in msg
    assert ei.value.exit_code == 3
    assert ei.value.stderr == "boom"


def test_non_zero_exit_without_stderr():
    cmd = CommandLine("/jdk/bin/jdeps", ("/out",))
    with pytest.raises(NonZeroExit) as ei:
        check_outcome(cmd, ExecutionOutcome(2, "", ""))
    assert str(ei.value) == "\nExit code: 2\nCommand line was: /jdk/bin/jdeps /out\n\n"


def test_success_output_is_trimmed():
    cmd = CommandLine("/jdk/bin/jdeps", ("/out",))
    assert check_outcome(cmd, ExecutionOutcome(0, "\n  a -> b  \n", "")) == "a -> b"


def test_blank_success_output_is_none():
    cmd = CommandLine("/jdk/bin/jdeps", ("/out",))
    assert check_outcome(cmd, ExecutionOutcome(0, " \n\t", "")) is None


def test_nul_byte_in_argument_is_spawn_error():
    cmd = CommandLine(sys.executable, ("-c", "pass", "a\0b"))
    with pytest.raises(ProcessSpawnError) as ei:
        ProcessExecutor().execute(cmd)
    assert isinstance(ei.value.__cause__, ValueError)


def test_missing_executable_is_spawn_error(tmp_path):
    cmd = CommandLine(str(tmp_path / "no-such-jdeps"), ("/out",))
    with pytest.raises(ProcessSpawnError):
        ProcessExecutor().execute(cmd)


@pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX permission bits")
def test_non_executable_file_is_spawn_error(tmp_path):
    exe = tmp_path / "jdeps"
    exe.write_text("not a program", encoding="utf-8")
    exe.chmod(0o644)
    with pytest.raises(ProcessExecutionError):
        ProcessExecutor().execute(CommandLine(str(exe), ("/out",)))


def test_timeout_kills_child():
    cmd = python_cmd("import time; time.sleep(30)")
    with pytest.raises(ProcessTimeout) as ei:
        ProcessExecutor(timeout_sec=1).execute(cmd)
    assert "did not finish" in str(ei.value)
