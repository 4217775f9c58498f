from __future__ import annotations

"""Bundle output writer: parent-directory creation plus a single final write."""

import logging
from pathlib import Path
from typing import Optional

from codebundle.core.errors import ErrorKind, StageResult
from codebundle.core.interfaces.fs import BundleWriterProtocol
from codebundle.logging.helpers import get_logger, trace_io
from codebundle.utils.paths import absolute_path


class BundleWriter(BundleWriterProtocol):
    def __init__(self, *, encoding: str = 'utf-8', logger: Optional[logging.Logger] = None) -> None:
        self._encoding = encoding
        self._log = logger or get_logger('io.writer')

    def ensure_parent(self, path: Path) -> StageResult[Path]:
        """Create the parent directory of *path* when it is missing."""
        parent = absolute_path(path).parent
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            self._log.error('⚠  could not create %s (%s)', parent, exc.strerror or exc)
            return StageResult.failure(
                ErrorKind.DIRECTORY_CREATION_FAILURE,
                'Unable to create output directory.',
                path=parent,
            )
        return StageResult.success(parent)

    def write(self, path: Path, text: str) -> StageResult[Path]:
        target = absolute_path(path)
        parent = self.ensure_parent(target)
        if not parent.ok:
            return StageResult.propagate(parent)
        try:
            # Line breaks in *text* are already final; no newline translation.
            with open(target, 'w', encoding=self._encoding, newline='') as fh:
                fh.write(text)
        except OSError as exc:
            self._log.error('⚠  could not write %s (%s)', target, exc.strerror or exc)
            return StageResult.failure(
                ErrorKind.FILE_WRITE_FAILURE,
                f'Unable to write output file: {target}',
                path=target,
            )
        trace_io(self._log, 'wrote bundle', path=str(target), chars=len(text))
        return StageResult.success(target)
