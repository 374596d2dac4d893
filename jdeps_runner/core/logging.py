"""JSON line logging for jdeps invocations.

Every record is one JSON object. Per-invocation context passed through
``extra=`` (``invocation_id``, ``exit_code``, ``command_line``) becomes
top-level fields, so a failing build step can be traced back to the
exact jdeps call:

    {"ts": "...", "level": "ERROR", "logger": "jdeps_runner.services.jdeps_service",
     "msg": "jdeps failed", "invocation_id": "...", "exit_code": 3, "command_line": "..."}
"""

from __future__ import annotations

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import TextIO

# extra= keys copied onto the JSON payload
CONTEXT_FIELDS = ("invocation_id", "exit_code", "command_line", "executable")


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is not None:
                payload[field] = value

        if record.exc_info and record.exc_info[0] is not None:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def setup_logging(stream: TextIO | None = None) -> None:
    """Send JSON records to ``stream`` (stdout when omitted).

    ``jdeps-run`` passes stderr so stdout carries only jdeps' own output.
    The level comes from ``LOG_LEVEL`` (default ``INFO``).
    """
    level = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(JSONFormatter())

    root = logging.getLogger()
    root.setLevel(level)
    # replace, not stack: uvicorn and repeated CLI calls both install handlers
    root.handlers.clear()
    root.addHandler(handler)

    for noisy in ("uvicorn.access", "httpcore", "httpx"):
        logging.getLogger(noisy).setLevel(logging.WARNING)
