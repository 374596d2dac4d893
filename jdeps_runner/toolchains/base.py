from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Mapping


class Toolchain(ABC):
    @property
    @abstractmethod
    def type(self) -> str: ...

    @abstractmethod
    def find_tool(self, tool_name: str) -> str | None: ...

    @abstractmethod
    def matches(self, requirements: Mapping[str, str]) -> bool: ...
