import os

from pydantic import BaseModel


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{name} must be a whole number of seconds, got {raw!r}") from None
    return value if value > 0 else None


class Settings(BaseModel):
    APP_VERSION: str = "0.3.0"

    # Explicit jdeps binary or directory holding it
    JDEPS_EXECUTABLE: str | None = os.getenv("JDEPS_EXECUTABLE") or None

    # No limit when unset
    JDEPS_TIMEOUT_SEC: int | None = _optional_int("JDEPS_TIMEOUT_SEC")

    # Toolchains
    JDEPS_TOOLCHAINS_FILE: str = os.getenv(
        "JDEPS_TOOLCHAINS_FILE",
        os.path.join(os.path.expanduser("~"), ".jdeps-runner", "toolchains.json"),
    )

    # Opt-in check of mutually exclusive options
    JDEPS_VALIDATE_OPTIONS: bool = os.getenv("JDEPS_VALIDATE_OPTIONS", "false").lower() in ("1", "true", "yes")


settings = Settings()
