from __future__ import annotations

"""
Local file discovery.

Walks the root directory recursively and returns every file as a `SourceFile`
(absolute path + path relative to the root). Build-output directories (`bin`,
`debug`) are pruned during the walk, and so is everything when the root itself
lies below one of them. Extension filtering happens later, in
`codebundle.processing.filters`.
"""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Collection, List, Optional

from codebundle.constants import EXCLUDED_DIR_NAMES
from codebundle.core.errors import ErrorKind, StageResult
from codebundle.core.interfaces.fs import FileDiscoveryProtocol
from codebundle.core.models import SourceFile
from codebundle.logging.helpers import get_logger, trace_io
from codebundle.utils.paths import absolute_path, has_excluded_segment, relative_to_root


@dataclass
class FileDiscovery(FileDiscoveryProtocol):
    """Recursive, read-only directory walker."""

    excluded_dirs: Collection[str] = field(default_factory=lambda: EXCLUDED_DIR_NAMES)
    logger: Optional[logging.Logger] = None

    def _logger(self) -> logging.Logger:
        return self.logger or get_logger('discovery')

    def discover(self, root: Path) -> StageResult[List[SourceFile]]:
        log = self._logger()
        base = absolute_path(root)
        if not base.is_dir():
            return StageResult.failure(
                ErrorKind.DIRECTORY_SCAN_FAILURE,
                f'Unable to scan directory: {base}',
                path=base,
            )

        errors: List[OSError] = []
        found: List[SourceFile] = []
        for dirpath, dirnames, filenames in os.walk(base, onerror=errors.append):
            dirnames[:] = [d for d in dirnames if d not in self.excluded_dirs]
            for fn in filenames:
                fp = Path(dirpath, fn)
                # Absolute path: a root under `bin/` excludes everything.
                if has_excluded_segment(fp, self.excluded_dirs):
                    continue
                rel = relative_to_root(fp, base)
                found.append(SourceFile(path=fp, relpath=rel))

        if errors:
            exc = errors[0]
            log.error('⚠  could not scan %s (%s)', exc.filename or base, exc.strerror or exc)
            return StageResult.failure(
                ErrorKind.DIRECTORY_SCAN_FAILURE,
                f'Unable to scan directory: {exc.filename or base}',
                path=Path(exc.filename) if exc.filename else base,
            )

        trace_io(log, 'discovered files', root=str(base), count=len(found))
        log.debug('discovered %d file(s) under %s', len(found), base)
        return StageResult.success(found)
