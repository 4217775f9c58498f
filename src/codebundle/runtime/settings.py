from __future__ import annotations

"""Process settings resolved from environment variables.

    CODEBUNDLE_JSON_LOGS=1     JSON diagnostics on stderr (same as --json-logs)
    CODEBUNDLE_LOG_LEVEL=NAME  base log level (default WARNING)
    CODEBUNDLE_TRACE_IO=1      per-file IO traces at DEBUG level
    DEBUG=1                    re-raise unexpected exceptions
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional


def _flag(env: Mapping[str, str], name: str) -> bool:
    return env.get(name, '').strip() == '1'


def _level(raw: Optional[str], default: int) -> int:
    if not raw:
        return default
    value = logging.getLevelName(raw.strip().upper())
    return value if isinstance(value, int) else default


@dataclass(frozen=True)
class RuntimeSettings:
    json_logs: bool = False
    log_level: int = logging.WARNING
    trace_io: bool = False
    debug: bool = False

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> 'RuntimeSettings':
        env = os.environ if env is None else env
        return cls(
            json_logs=_flag(env, 'CODEBUNDLE_JSON_LOGS'),
            log_level=_level(env.get('CODEBUNDLE_LOG_LEVEL'), logging.WARNING),
            trace_io=_flag(env, 'CODEBUNDLE_TRACE_IO'),
            debug=_flag(env, 'DEBUG'),
        )
