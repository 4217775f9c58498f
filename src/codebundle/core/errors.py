from __future__ import annotations

"""
Error values shared by every bundling stage.

Stages never raise for expected failures (bad language, unreadable file,
output directory collisions, ...). They return a `StageResult` carrying either
a value or a `BundleError`, and the caller checks `ok` before moving on. The
command boundary renders the error as a single `Error: <message>` line.
"""

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Generic, Optional, TypeVar

T = TypeVar('T')


class ErrorKind(enum.Enum):
    MISSING_OUTPUT_PATH = 'missing_output_path'
    DIRECTORY_CREATION_FAILURE = 'directory_creation_failure'
    UNSUPPORTED_LANGUAGE = 'unsupported_language'
    FILE_READ_FAILURE = 'file_read_failure'
    FILE_WRITE_FAILURE = 'file_write_failure'
    DIRECTORY_SCAN_FAILURE = 'directory_scan_failure'
    INPUT_ABORTED = 'input_aborted'
    USAGE = 'usage'


@dataclass(frozen=True)
class BundleError:
    kind: ErrorKind
    message: str
    path: Optional[Path] = None

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class StageResult(Generic[T]):
    """Outcome of a single pipeline stage: either `value` or `error`."""

    value: Optional[T] = None
    error: Optional[BundleError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> 'StageResult[T]':
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, *, path: Optional[Path] = None) -> 'StageResult[T]':
        return cls(error=BundleError(kind=kind, message=message, path=path))

    @classmethod
    def propagate(cls, other: 'StageResult') -> 'StageResult[T]':
        """Re-type a failed result so it can be returned from another stage."""
        if other.error is None:
            raise ValueError('cannot propagate a successful result')
        return cls(error=other.error)


class UsageError(ValueError):
    """Raised by the argument parser instead of exiting the process."""
