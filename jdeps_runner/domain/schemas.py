from __future__ import annotations

from itertools import combinations
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from jdeps_runner.domain.errors import ConflictingOptions

PROPERTY_PREFIX = "jdeps."

# build property name -> field name
PROPERTY_FIELDS: dict[str, str] = {
    "jdeps.summary": "summary",
    "jdeps.jdkInternals": "jdk_internals",
    "jdeps.apiOnly": "api_only",
    "jdeps.verbose": "verbose",
    "jdeps.verboseLevel": "verbose_level",
    "jdeps.regex": "regex",
    "jdeps.include": "include",
    "jdeps.profile": "profile",
    "jdeps.recursive": "recursive",
    "jdeps.version": "version",
    "jdeps.dotOutputDirectory": "dot_output_directory",
}

_TRUE = {"", "true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


def parse_bool(key: str, value: str) -> bool:
    v = value.strip().lower()
    if v in _TRUE:
        return True
    if v in _FALSE:
        return False
    raise ValueError(f"Property {key} expects a boolean, got {value!r}")


class JDepsConfig(BaseModel):
    """All options of one jdeps invocation.

    ``packages``, ``regex``, ``summary`` and ``include`` are documented as
    mutually exclusive (and ``jdk_internals`` with the first three), but
    nothing here enforces it. Call :meth:`ensure_compatible` to opt in.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    summary: bool = Field(False, description="Print dependency summary only.")
    jdk_internals: bool = Field(
        False,
        alias="jdkInternals",
        description="Find class-level dependences on JDK internal APIs.",
    )
    api_only: bool = Field(False, alias="apiOnly", description="Restrict analysis to APIs.")
    verbose: bool = Field(False, description="Print all class level dependencies.")
    verbose_level: str | None = Field(
        None,
        alias="verboseLevel",
        description='Print package-level or class-level dependencies ("package" or "class").',
    )
    packages: tuple[str, ...] = Field((), description="Restrict analysis to classes in these packages.")
    regex: str | None = Field(None, description="Restrict analysis to packages matching pattern.")
    include: str | None = Field(None, description="Restrict analysis to classes matching pattern.")
    profile: bool = Field(False, description="Show profile or the file containing a package.")
    recursive: bool = Field(False, description="Recursively traverse all dependencies.")
    version: bool = Field(False, description="Print jdeps version information.")
    dot_output_directory: str | None = Field(
        None,
        alias="dotOutputDirectory",
        description="Destination directory for DOT file output.",
    )
    output_directory: str = Field(
        ...,
        alias="outputDirectory",
        min_length=1,
        description="Directory of compiled classes to analyse; always the last argument.",
    )
    classpath: tuple[str, ...] = Field((), description="Classpath entries, in order.")

    @classmethod
    def from_properties(cls, properties: Mapping[str, str], **fields: Any) -> "JDepsConfig":
        """Build a config from ``jdeps.*`` build properties.

        Explicit keyword ``fields`` win over properties. Keys outside the
        ``jdeps.`` namespace are ignored.
        """
        values: dict[str, Any] = {}
        for key, raw in properties.items():
            if not key.startswith(PROPERTY_PREFIX):
                continue
            name = PROPERTY_FIELDS.get(key)
            if name is None:
                raise ValueError(f"Unknown jdeps property: {key}")
            if cls.model_fields[name].annotation is bool:
                values[name] = parse_bool(key, raw)
            else:
                values[name] = raw
        values.update(fields)
        return cls.model_validate(values)

    def conflicts(self) -> list[str]:
        active = {
            "packages": bool(self.packages),
            "regex": self.regex is not None,
            "summary": self.summary,
            "include": self.include is not None,
        }
        found = [
            f"{a} and {b} are mutually exclusive"
            for a, b in combinations(active, 2)
            if active[a] and active[b]
        ]
        if self.jdk_internals:
            found.extend(
                f"jdkInternals cannot be used with {name}"
                for name in ("packages", "regex", "summary")
                if active[name]
            )
        return found

    def ensure_compatible(self) -> "JDepsConfig":
        found = self.conflicts()
        if found:
            raise ConflictingOptions(found)
        return self
