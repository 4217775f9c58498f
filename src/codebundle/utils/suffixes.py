from __future__ import annotations
"""Extension utilities shared by the filter and the sorter.

Extensions are compared lower-cased everywhere so that `Main.PY` is both kept
by a `.py` filter and grouped with `.py` files when sorting by type.
"""

from pathlib import PurePath
from typing import Iterable, FrozenSet


def normalize_extension(ext: str) -> str:
    """Normalize an extension token: `PY` / `.PY` -> `.py`."""
    e = (ext or "").strip().lower()
    if not e:
        return ""
    return e if e.startswith(".") else f".{e}"


def normalize_extensions(exts: Iterable[str] | None) -> FrozenSet[str]:
    if not exts:
        return frozenset()
    return frozenset(n for n in (normalize_extension(e) for e in exts) if n)


def extension_of(filename: str) -> str:
    """Lower-cased last suffix of *filename* (empty for none)."""
    return PurePath(filename).suffix.lower()


def is_extension_allowed(filename: str, allowed: FrozenSet[str]) -> bool:
    """Return True if the extension of *filename* is in *allowed*."""
    ext = extension_of(filename)
    return bool(ext) and ext in allowed
