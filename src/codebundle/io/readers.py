from __future__ import annotations

"""Text reader used by the content transformer."""

import logging
from pathlib import Path
from typing import Optional

from codebundle.core.errors import ErrorKind, StageResult
from codebundle.core.interfaces.fs import FileReaderProtocol
from codebundle.logging.helpers import trace_io


class DefaultTextReader(FileReaderProtocol):
    """Read a whole file as UTF-8 text.

    Undecodable bytes become U+FFFD; content is treated as opaque text.
    """

    def __init__(self, *, encoding: str = 'utf-8', logger: Optional[logging.Logger] = None) -> None:
        self._encoding = encoding
        self._log = logger or logging.getLogger('codebundle.readers')

    def read_text(self, path: Path) -> StageResult[str]:
        try:
            # newline='' keeps CR/CRLF so line handling sees the raw breaks.
            with open(path, 'r', encoding=self._encoding, errors='replace', newline='') as fh:
                text = fh.read()
        except OSError as exc:
            self._log.error('⚠  could not read %s (%s)', path, exc.strerror or exc)
            return StageResult.failure(ErrorKind.FILE_READ_FAILURE, f'Unable to read file: {path}', path=path)
        trace_io(self._log, 'read file', path=str(path), chars=len(text))
        return StageResult.success(text)
