from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Mapping

from .base import Toolchain
from .jdk import JdkToolchain


class ToolchainManager:
    def __init__(self, toolchains: Iterable[Toolchain] = ()):
        self._toolchains = list(toolchains)

    def list(self) -> list[Toolchain]:
        return list(self._toolchains)

    def get_toolchain(self, type_: str, requirements: Mapping[str, str] | None = None) -> Toolchain | None:
        """First registered toolchain of ``type_`` satisfying ``requirements``."""
        for tc in self._toolchains:
            if tc.type == type_ and tc.matches(requirements or {}):
                return tc
        return None


def load_toolchains(path: Path) -> list[Toolchain]:
    """
    Read toolchain declarations from a JSON list:
    [{"type": "jdk", "home": "/opt/jdk-17", "version": "17", "vendor": "temurin"}]
    A missing file declares no toolchains.
    """
    if not path.exists():
        return []
    try:
        entries = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Malformed toolchains file {path}: {e}") from e

    if not isinstance(entries, list):
        raise ValueError(f"Toolchains file {path} must contain a JSON list")

    toolchains: list[Toolchain] = []
    for i, entry in enumerate(entries):
        if not isinstance(entry, dict) or not entry.get("home"):
            raise ValueError(f"Toolchain #{i} in {path} needs a 'home'")
        kind = entry.get("type", "jdk")
        if kind != "jdk":
            raise ValueError(f"Toolchain #{i} in {path} has unsupported type {kind!r}")
        version = entry.get("version")
        toolchains.append(
            JdkToolchain(entry["home"], str(version) if version is not None else None, entry.get("vendor"))
        )
    return toolchains
