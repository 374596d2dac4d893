import os
import stat
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from jdeps_runner.api.jdeps_routes import get_jdeps_service
from jdeps_runner.core.config import settings
from jdeps_runner.core.platform import Platform
from jdeps_runner.jdeps.command_line import CommandLineBuilder
from jdeps_runner.jdeps.executor import ProcessExecutor
from jdeps_runner.jdeps.resolver import ExecutableResolver
from jdeps_runner.main import app
from jdeps_runner.services.jdeps_service import JDepsService

posix_only = pytest.mark.skipif(sys.platform.startswith("win"), reason="needs an executable script")

LINUX = Platform(is_windows=False, path_separator=":")
WINDOWS = Platform(is_windows=True, path_separator=";")


@pytest.fixture(autouse=True)
def _isolate_settings(tmp_path, monkeypatch):
    """Keep tests away from the real JDK, JAVA_HOME and toolchains file."""
    monkeypatch.setattr(settings, "JDEPS_EXECUTABLE", None)
    monkeypatch.setattr(settings, "JDEPS_TIMEOUT_SEC", None)
    monkeypatch.setattr(settings, "JDEPS_VALIDATE_OPTIONS", False)
    monkeypatch.setattr(settings, "JDEPS_TOOLCHAINS_FILE", str(tmp_path / "toolchains.json"))
    monkeypatch.delenv("JAVA_HOME", raising=False)


def write_fake_jdeps(bin_dir: Path, body: str = "", name: str = "jdeps") -> Path:
    """Executable Python script standing in for jdeps."""
    bin_dir.mkdir(parents=True, exist_ok=True)
    exe = bin_dir / name
    exe.write_text(f"#!{sys.executable}\nimport sys\n{body}\n", encoding="utf-8")
    exe.chmod(exe.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return exe


@pytest.fixture
def fake_jdk(tmp_path) -> Path:
    """JDK home whose bin/jdeps echoes its arguments and exits 0."""
    home = tmp_path / "jdk"
    write_fake_jdeps(home / "bin", "print(' '.join(sys.argv[1:]))")
    return home


@pytest.fixture
def service() -> JDepsService:
    platform = Platform(is_windows=False, path_separator=os.pathsep)
    return JDepsService(
        resolver=ExecutableResolver(platform, environ={}),
        builder=CommandLineBuilder(platform.path_separator),
        executor=ProcessExecutor(timeout_sec=30),
    )


@pytest.fixture
def client(service):
    app.dependency_overrides[get_jdeps_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
