# src/codebundle/utils/paths.py
"""
paths – Small, centralized path helpers for codebundle.

Provides:
  • has_excluded_segment(path, names) – build-output directory detection
  • relative_to_root(path, root)      – host-separator relative path
  • absolute_path(path)               – absolute path without resolving links
"""

from __future__ import annotations

import os
from pathlib import Path, PurePath
from typing import Collection


def has_excluded_segment(path: PurePath, names: Collection[str]) -> bool:
    """Return True if a directory segment of *path* is one of *names*.

    Only directory components count; a file literally named ``bin`` is kept.
    Matching is case-sensitive.
    """
    return any(part in names for part in path.parts[:-1])


def relative_to_root(path: Path, root: Path) -> str:
    """Return *path* relative to *root* using the host separator."""
    return os.path.relpath(path, root)


def absolute_path(path: Path) -> Path:
    """Return an absolute version of *path* (symlinks are not resolved)."""
    return Path(os.path.abspath(path))
