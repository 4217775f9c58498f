from __future__ import annotations

"""Value parsers shared by the argument parser and the interactive responder."""

import argparse
from typing import Optional

_TRUE = 'true'
_FALSE = 'false'


def try_parse_bool(raw: Optional[str]) -> Optional[bool]:
    """Return True/False for `true`/`false` (any case, surrounding blanks ignored), else None."""
    token = (raw or '').strip().lower()
    if token == _TRUE:
        return True
    if token == _FALSE:
        return False
    return None


def bool_arg(raw: str) -> bool:
    """argparse `type=` callable for optional explicit boolean flag values."""
    value = try_parse_bool(raw)
    if value is None:
        raise argparse.ArgumentTypeError(f"invalid boolean value: {raw!r} (expected true/false)")
    return value


def format_bool(value: bool) -> str:
    return _TRUE if value else _FALSE
