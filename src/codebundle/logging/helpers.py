from __future__ import annotations

"""Logging setup for codebundle.

Diagnostics go to stderr through the single `codebundle` base logger; every
component logs to a child (`codebundle.pipeline`, `codebundle.io.writer`, ...).
User-facing result lines are printed by the CLI and never pass through here.
"""

import logging
import os
from typing import Optional, TextIO

BASE_LOGGER = "codebundle"


class JsonLogFormatter(logging.Formatter):
    """One JSON object per record.

    Keys: `ts` (UTC, milliseconds), `level`, `module` (logger name), `msg`,
    `version` (package version, read once), and `ctx` when the record was
    logged with `extra={"context": {...}}`.
    """

    def __init__(self) -> None:
        super().__init__()
        self._version = self._resolve_version()

    @staticmethod
    def _resolve_version() -> str:
        try:
            # Lazy import: the package __init__ may still be loading.
            from codebundle import __version__ as _v  # type: ignore
            return str(_v)
        except ImportError:
            return os.getenv("CODEBUNDLE_VERSION", "unknown")

    def format(self, record: logging.LogRecord) -> str:
        from datetime import datetime, timezone
        import json

        ts = datetime.fromtimestamp(record.created, tz=timezone.utc)
        ts_str = ts.isoformat(timespec="milliseconds").replace("+00:00", "Z")

        payload = {
            "ts": ts_str,
            "level": record.levelname,
            "module": record.name,
            "msg": record.getMessage(),
            "version": self._version,
        }

        ctx = getattr(record, "context", None)
        if isinstance(ctx, dict) and ctx:
            payload["ctx"] = ctx

        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_base_logger(
    *, json_logs: bool = False, level: int = logging.WARNING, stream: Optional[TextIO] = None
) -> logging.Logger:
    """Install a single stderr (or *stream*) handler on the `codebundle` logger.

    Any handler from an earlier call is removed first, so a later `--json-logs`
    or a different stream takes effect. Records do not propagate to the root.
    """
    import sys as _sys

    base = logging.getLogger(BASE_LOGGER)
    for h in list(base.handlers):
        base.removeHandler(h)
    base.setLevel(level)
    base.propagate = False

    handler = logging.StreamHandler(stream or _sys.stderr)
    if json_logs:
        handler.setFormatter(JsonLogFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    base.addHandler(handler)

    return base


def get_logger(name: str | None = None) -> logging.Logger:
    """`get_logger("io.writer")` -> `codebundle.io.writer`; empty name -> base."""
    if not name or name == BASE_LOGGER:
        return logging.getLogger(BASE_LOGGER)
    if name.startswith(BASE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")


def is_trace_io_enabled() -> bool:
    """True when CODEBUNDLE_TRACE_IO=1."""
    return os.getenv("CODEBUNDLE_TRACE_IO") == "1"


def trace_io(logger: logging.Logger, message: str, **ctx) -> None:
    """Log *message* at DEBUG, but only with CODEBUNDLE_TRACE_IO=1.

    Keyword arguments travel as the record context (`ctx` in JSON logs).
    """
    if not is_trace_io_enabled():
        return
    if ctx:
        logger.debug("%s | ctx=%r", message, ctx, extra={"context": ctx})
    else:
        logger.debug("%s", message)
